"""Prompt template renderer.

Templates mix literal text with two kinds of markup:

- ``{{name}}`` placeholders, replaced by a substitution value (or removed
  when no value is given).
- ``{{#if name}} ... {{/if}}`` conditional blocks, kept (markers stripped)
  when the named condition is truthy and dropped entirely otherwise.
  Blocks may nest. A marker that sits alone on its line takes the line
  break with it, so removed blocks do not leave blank lines behind.

Rendering runs in two passes: conditional blocks are resolved against the
template text first, then placeholders are substituted in a single sweep.
Substituted values are never re-scanned, so a diff that happens to contain
``{{...}}`` is inserted verbatim. Unbalanced markers are dropped during
parsing, and a final sweep removes any malformed marker (such as a bare
``{{#if}}``) before placeholders are substituted, so no marker from the
template reaches the output.
"""

import re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

# A marker alone on its line (with its line break), or an inline marker.
_MARKER_RE = re.compile(
    r"^[ \t]*\{\{\s*(?:#if\s+(?P<line_name>[^}\s]+)|/if)\s*\}\}[ \t]*(?:\n|\Z)"
    r"|\{\{\s*(?:#if\s+(?P<name>[^}\s]+)|/if)\s*\}\}",
    re.MULTILINE,
)

# Malformed markers the parser could not pair, e.g. "{{#if}}" or "{{/if x}}"
_LEFTOVER_MARKER_RE = re.compile(r"\{\{\s*(?:#if\b|/if\b)[^}]*\}\}")

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}\s#/][^{}\s]*)\s*\}\}")


@dataclass
class _Block:
    condition: Optional[str]
    children: list[Union[str, "_Block"]] = field(default_factory=list)


def _parse(template: str) -> _Block:
    """Parse conditional markers into a block tree."""
    root = _Block(condition=None)
    stack = [root]
    pos = 0

    for match in _MARKER_RE.finditer(template):
        stack[-1].children.append(template[pos:match.start()])
        pos = match.end()

        name = match.group("line_name") or match.group("name")
        if name:
            block = _Block(condition=name)
            stack[-1].children.append(block)
            stack.append(block)
        elif len(stack) > 1:
            stack.pop()
        # A closing marker with nothing open is dropped

    stack[-1].children.append(template[pos:])

    # Blocks left open at the end lose their marker and keep their text
    while len(stack) > 1:
        stack.pop().condition = None

    return root


def _resolve(block: _Block, conditionals: Mapping[str, bool]) -> str:
    parts = []
    for child in block.children:
        if isinstance(child, str):
            parts.append(child)
        elif child.condition is None or conditionals.get(child.condition):
            parts.append(_resolve(child, conditionals))
    return "".join(parts)


def render(
    template: str,
    substitutions: Optional[Mapping[str, Optional[str]]] = None,
    conditionals: Optional[Mapping[str, bool]] = None,
) -> str:
    """Render a prompt template.

    Args:
        template: Raw template text.
        substitutions: Placeholder name to replacement text. Missing or None
            values render as an empty string.
        conditionals: Condition name to truthiness. Conditions that are
            missing are treated as false.

    Returns:
        The rendered prompt with no template markup left in it.
    """
    substitutions = substitutions or {}
    conditionals = conditionals or {}

    resolved = _resolve(_parse(template), conditionals)
    resolved = _LEFTOVER_MARKER_RE.sub("", resolved)

    def _substitute(match: re.Match) -> str:
        value = substitutions.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_substitute, resolved)
