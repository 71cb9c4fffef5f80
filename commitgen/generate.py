"""Generation flows: commit message, changelog and PR description.

Each flow gathers text from git, returns None when there is nothing to
describe, renders its prompt template, and makes exactly one provider call.
Errors from git (GitError), templates (TemplateNotFoundError) and providers
(LLMError and subclasses) propagate to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Optional

from commitgen.git import (
    DateRange,
    get_changelog_commits,
    get_commit_history,
    get_diff,
    get_diff_between,
    get_latest_tag,
    get_repo_url,
)
from commitgen.llm import BaseLLMProvider, PromptRequest
from commitgen.prompts import get_system_prompt, render_template
from commitgen.version import BumpMode, bump_version

DEFAULT_BASE_REF = "main"
DEFAULT_VERSION = "0.0.0"


class Audience(str, Enum):
    """Who a changelog is written for."""

    TECHNICAL = "technical"
    END_USER = "end-user"
    BOTH = "both"


@dataclass
class GenerationResult:
    """Generated text together with the request that produced it."""

    text: str
    request: PromptRequest
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    version: Optional[str] = None


@dataclass
class ChangelogMetadata:
    """Optional facts rendered into the changelog prompt.

    Every field may be absent; only present fields reach the prompt.
    """

    version: Optional[str] = None
    audience: Optional[Audience] = None
    contributors: list[str] = field(default_factory=list)
    date_range: Optional[DateRange] = None
    repo_url: Optional[str] = None


@dataclass
class ChangelogOptions:
    """Caller choices for the changelog flow."""

    since: Optional[str] = None
    until: Optional[str] = None
    version: Optional[str] = None
    version_bump: Optional[BumpMode] = None
    audience: Optional[Audience] = None
    show_contributors: bool = False
    link_commits: bool = False
    context: Optional[str] = None

    def validate(self) -> None:
        """Check option combinations.

        Raises:
            ValueError: If an explicit bump is requested without a version.
        """
        if self.version_bump not in (None, BumpMode.AUTO) and not self.version:
            raise ValueError(
                f"A {BumpMode(self.version_bump).value} version bump requires the current version (--version)"
            )


@dataclass
class _ChangelogState:
    options: ChangelogOptions
    commits: str = ""
    metadata: ChangelogMetadata = field(default_factory=ChangelogMetadata)


def _clean_context(context: Optional[str]) -> Optional[str]:
    if context is None or not context.strip():
        return None
    return context.strip()


def build_request(
    name: str,
    substitutions: Mapping[str, Optional[str]],
    conditionals: Mapping[str, bool],
) -> PromptRequest:
    """Render a named template into a PromptRequest.

    Raises:
        TemplateNotFoundError: If the template does not exist.
    """
    return PromptRequest(
        system_prompt=get_system_prompt(name),
        user_content=render_template(name, substitutions, conditionals),
    )


def _generate(provider: BaseLLMProvider, request: PromptRequest, version: Optional[str] = None) -> GenerationResult:
    result = provider.generate(request)
    return GenerationResult(
        text=result.text,
        request=request,
        model=result.model,
        input_tokens=result.input_tokens,
        output_tokens=result.output_tokens,
        version=version,
    )


# ============================================================
# COMMIT
# ============================================================


def generate_commit_message(
    provider: BaseLLMProvider,
    context: Optional[str] = None,
) -> Optional[GenerationResult]:
    """Generate a commit message for uncommitted changes.

    Args:
        provider: The LLM provider to call.
        context: Optional free-text hint from the user.

    Returns:
        The result, or None if there are no changes.
    """
    diff = get_diff()
    if not diff.strip():
        return None

    context = _clean_context(context)
    request = build_request(
        "commit",
        {"diff": diff, "context": context},
        {"context": context is not None},
    )
    return _generate(provider, request)


# ============================================================
# CHANGELOG
# ============================================================


def _collect_commits(state: _ChangelogState) -> None:
    opts = state.options
    log = get_changelog_commits(
        since=opts.since,
        until=opts.until,
        link_commits=opts.link_commits,
        show_contributors=opts.show_contributors,
    )
    state.commits = log.commits
    state.metadata.contributors = log.contributors
    state.metadata.date_range = log.date_range


def _resolve_repo_url(state: _ChangelogState) -> None:
    if state.options.link_commits:
        state.metadata.repo_url = get_repo_url()


def _resolve_version(state: _ChangelogState) -> None:
    opts = state.options
    if opts.version_bump is None:
        state.metadata.version = opts.version
        return

    current = opts.version
    if not current:
        tag = get_latest_tag()
        current = tag.lstrip("vV") if tag else DEFAULT_VERSION
    state.metadata.version = bump_version(state.commits, current, opts.version_bump)


# Run in order after the commit log is collected
_CHANGELOG_METADATA_STEPS: tuple[Callable[[_ChangelogState], None], ...] = (
    _resolve_repo_url,
    _resolve_version,
)


def _changelog_prompt_values(state: _ChangelogState) -> tuple[dict, dict]:
    meta = state.metadata
    context = _clean_context(state.options.context)
    audience = Audience(meta.audience) if meta.audience else None

    substitutions = {
        "commits": state.commits,
        "version": meta.version,
        "audience": audience.value if audience else None,
        "contributors": "\n".join(f"- {c}" for c in meta.contributors),
        "date_from": meta.date_range.start.isoformat() if meta.date_range else None,
        "date_to": meta.date_range.end.isoformat() if meta.date_range else None,
        "repo_url": meta.repo_url,
        "context": context,
    }
    conditionals = {
        "version": bool(meta.version),
        "audience": audience is not None,
        "audience_technical": audience == Audience.TECHNICAL,
        "audience_end_user": audience == Audience.END_USER,
        "audience_both": audience == Audience.BOTH,
        "contributors": bool(meta.contributors),
        "date_range": meta.date_range is not None,
        "repo_url": bool(meta.repo_url),
        "link_commits": state.options.link_commits,
        "context": context is not None,
    }
    return substitutions, conditionals


def generate_changelog(
    provider: BaseLLMProvider,
    options: Optional[ChangelogOptions] = None,
) -> Optional[GenerationResult]:
    """Generate a changelog from commit history.

    Steps run strictly in order: commit log (with contributors and date
    range), repository URL, version, prompt rendering, provider call.

    Args:
        provider: The LLM provider to call.
        options: Range, version and presentation choices.

    Returns:
        The result (with the resolved version, if any), or None if the
        range holds no commits.

    Raises:
        ValueError: If the options are inconsistent.
    """
    options = options or ChangelogOptions()
    options.validate()

    state = _ChangelogState(
        options=options,
        metadata=ChangelogMetadata(audience=options.audience),
    )
    _collect_commits(state)
    if not state.commits.strip():
        return None

    for step in _CHANGELOG_METADATA_STEPS:
        step(state)

    request = build_request("changelog", *_changelog_prompt_values(state))
    return _generate(provider, request, version=state.metadata.version)


# ============================================================
# PULL REQUEST
# ============================================================


def generate_pr_description(
    provider: BaseLLMProvider,
    base: str = DEFAULT_BASE_REF,
    head: str = "HEAD",
    include_commits: bool = False,
    context: Optional[str] = None,
) -> Optional[GenerationResult]:
    """Generate a pull request description for head against base.

    Args:
        provider: The LLM provider to call.
        base: The branch the PR targets.
        head: The ref being merged.
        include_commits: Send each commit with its diff instead of one
            condensed diff.
        context: Optional free-text hint from the user.

    Returns:
        The result, or None if head has no changes relative to base.
    """
    if include_commits:
        changes = get_commit_history(base, head)
    else:
        changes = get_diff_between(base, head)

    if not changes.strip():
        return None

    context = _clean_context(context)
    request = build_request(
        "pr",
        {"changes": changes, "base": base, "head": head, "context": context},
        {
            "include_commits": include_commits,
            "diff_only": not include_commits,
            "context": context is not None,
        },
    )
    return _generate(provider, request)
