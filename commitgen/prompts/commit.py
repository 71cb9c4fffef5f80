"""Commit message prompt template."""

COMMIT_TEMPLATE = """Write a git commit message for the changes in the diff below.

Rules:
- First line: a Conventional Commits subject, e.g. "feat(api): add token refresh".
  Use one of: feat, fix, docs, refactor, perf, test, build, ci, chore, style, revert.
- Subject in imperative mood, at most 72 characters, no trailing period.
- Leave one blank line, then a short body explaining what changed and why,
  wrapped at 72 characters. Omit the body for trivial changes.
- Mark breaking changes with "!" after the type and a "BREAKING CHANGE:" footer.
- Only describe changes shown in the diff. Do not infer or assume other changes.
- Output ONLY the commit message. No markdown fences. No commentary.
{{#if context}}

Additional context from the author:
{{context}}
{{/if}}

DIFF:
{{diff}}
"""
