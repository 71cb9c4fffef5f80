"""LLM prompt templates for commitgen.

This package contains the prompt templates and the renderer that fills them:
- system: Per-flow system prompts
- commit: Commit message template
- changelog: Changelog template
- pr: Pull request description template
- renderer: Placeholder and conditional-block rendering

Users can override any template by placing ``<name>.prompt.txt`` in
~/.commitgen/templates/. Overrides are read on every call.
"""

from typing import Mapping, Optional

from commitgen import global_config
from commitgen.prompts.changelog import CHANGELOG_TEMPLATE
from commitgen.prompts.commit import COMMIT_TEMPLATE
from commitgen.prompts.pr import PR_TEMPLATE
from commitgen.prompts.renderer import render
from commitgen.prompts.system import SYSTEM_PROMPTS


class TemplateNotFoundError(Exception):
    """Raised when a prompt template has no backing content."""

    pass


TEMPLATES = {
    "commit": COMMIT_TEMPLATE,
    "changelog": CHANGELOG_TEMPLATE,
    "pr": PR_TEMPLATE,
}

TEMPLATE_SUFFIX = ".prompt.txt"


def load_template(name: str) -> str:
    """Load a prompt template by name.

    Args:
        name: Template name ("commit", "changelog" or "pr").

    Returns:
        The raw template text.

    Raises:
        TemplateNotFoundError: If neither an override nor a built-in template
            exists, or the template is empty.
    """
    override = global_config.get_templates_dir() / f"{name}{TEMPLATE_SUFFIX}"
    if override.is_file():
        try:
            template = override.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateNotFoundError(f"Cannot read template override {override}: {e}")
    else:
        template = TEMPLATES.get(name)

    if not template or not template.strip():
        raise TemplateNotFoundError(f"No prompt template named '{name}'")
    return template


def get_system_prompt(name: str) -> str:
    """Get the system prompt that pairs with a template."""
    try:
        return SYSTEM_PROMPTS[name]
    except KeyError:
        raise TemplateNotFoundError(f"No system prompt for template '{name}'")


def render_template(
    name: str,
    substitutions: Optional[Mapping[str, Optional[str]]] = None,
    conditionals: Optional[Mapping[str, bool]] = None,
) -> str:
    """Load a template by name and render it.

    Raises:
        TemplateNotFoundError: If the template does not exist.
    """
    return render(load_template(name), substitutions, conditionals)


__all__ = [
    "TEMPLATES",
    "TemplateNotFoundError",
    "get_system_prompt",
    "load_template",
    "render",
    "render_template",
]
