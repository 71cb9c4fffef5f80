"""Semantic version bumping from Conventional Commits text."""

import re
from enum import Enum
from typing import NamedTuple


class BumpMode(str, Enum):
    """How to pick the version component to increment."""

    AUTO = "auto"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class VersionTriple(NamedTuple):
    """A parsed MAJOR.MINOR.PATCH version."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


_BREAKING_RE = re.compile(r"BREAKING CHANGE:|breaking:", re.IGNORECASE)
# A subject line, optionally listed as "- " or "* ", e.g. "feat(api): ..."
_FEAT_RE = re.compile(r"^[ \t]*(?:[-*][ \t]+)?feat(?:\([^)\n]*\))?:", re.MULTILINE)
_FIX_RE = re.compile(r"^[ \t]*(?:[-*][ \t]+)?fix(?:\([^)\n]*\))?:", re.MULTILINE)
_LEADING_DIGITS_RE = re.compile(r"\d+")


def _parse_component(value: str) -> int:
    match = _LEADING_DIGITS_RE.match(value.strip())
    return int(match.group()) if match else 0


def parse_version(version: str) -> VersionTriple:
    """Parse a dotted version string.

    Never raises: a leading "v" is ignored, missing components default to 0
    and components without leading digits count as 0.

    Args:
        version: A version such as "1.2.3", "v2.0" or "".

    Returns:
        The parsed VersionTriple.
    """
    text = (version or "").strip()
    if text[:1] in ("v", "V"):
        text = text[1:]

    parts = text.split(".") if text else []
    numbers = [_parse_component(part) for part in parts[:3]]
    numbers += [0] * (3 - len(numbers))
    return VersionTriple(*numbers)


def detect_bump(commit_text: str) -> BumpMode:
    """Infer the bump level from Conventional Commits markers.

    Precedence: breaking change, then feat, then fix, then patch as fallback.

    Args:
        commit_text: Aggregated commit messages.

    Returns:
        BumpMode.MAJOR, BumpMode.MINOR or BumpMode.PATCH.
    """
    text = commit_text or ""
    if _BREAKING_RE.search(text) or "!:" in text:
        return BumpMode.MAJOR
    if _FEAT_RE.search(text):
        return BumpMode.MINOR
    if _FIX_RE.search(text):
        return BumpMode.PATCH
    return BumpMode.PATCH


def bump_version(commit_text: str, current_version: str, mode: BumpMode | str = BumpMode.AUTO) -> str:
    """Compute the next version.

    Args:
        commit_text: Aggregated commit messages. Ignored unless mode is auto.
        current_version: The current "X.Y.Z" version.
        mode: auto, major, minor or patch.

    Returns:
        The bumped "X.Y.Z" version string.

    Raises:
        ValueError: If mode is not a valid BumpMode.
    """
    mode = BumpMode(mode)
    if mode == BumpMode.AUTO:
        mode = detect_bump(commit_text)

    current = parse_version(current_version)

    if mode == BumpMode.MAJOR:
        return str(VersionTriple(current.major + 1, 0, 0))
    if mode == BumpMode.MINOR:
        return str(VersionTriple(current.major, current.minor + 1, 0))
    return str(VersionTriple(current.major, current.minor, current.patch + 1))
