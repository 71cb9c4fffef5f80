"""System prompts for each generation flow."""

SYSTEM_PROMPT_COMMIT = "You write clean, concise commit messages."

SYSTEM_PROMPT_CHANGELOG = (
    "You write clear, well-organized changelogs from git history. "
    "Group related changes, keep entries short, and never invent changes "
    "that are not present in the commits."
)

SYSTEM_PROMPT_PR = (
    "You write pull request descriptions that help reviewers understand "
    "what changed, why, and what to check. Only describe changes that "
    "appear in the provided history or diff."
)

SYSTEM_PROMPTS = {
    "commit": SYSTEM_PROMPT_COMMIT,
    "changelog": SYSTEM_PROMPT_CHANGELOG,
    "pr": SYSTEM_PROMPT_PR,
}
