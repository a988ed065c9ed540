"""Host version parsing and per-command-family minimum versions."""

from __future__ import annotations

import re

from wp_block_cli.errors import ConfigurationError, VersionRequirementError

FAMILY_REQUIREMENTS: dict[str, str] = {
    "type": "5.0",
    "pattern": "5.5",
    "pattern-category": "5.5",
    "style": "5.3",
    "binding": "6.5",
    "template": "5.9",
    "synced-pattern": "5.0",
}

_VERSION_RE = re.compile(r"^\s*(?P<release>\d+(?:\.\d+)*)(?P<suffix>.*?)\s*$")


def parse_version(value: str) -> tuple[tuple[int, ...], int]:
    """Split a WordPress version string into (release, stage).

    ``stage`` is 0 for final releases and -1 for pre-releases such as
    ``6.5-RC1`` or ``6.6-beta2``. Development checkouts (``-src``) count as
    final releases.
    """
    match = _VERSION_RE.match(value or "")
    if match is None:
        raise ValueError(f"Unrecognised WordPress version: {value!r}")
    release = tuple(int(part) for part in match.group("release").split("."))
    suffix = match.group("suffix").lower().lstrip("-.")
    stage = 0 if not suffix or suffix == "src" else -1
    return release, stage


def wp_version_compare(current: str, minimum: str) -> int:
    """Return -1, 0 or 1 as ``current`` is lower, equal or higher than ``minimum``."""
    current_release, current_stage = parse_version(current)
    minimum_release, minimum_stage = parse_version(minimum)

    width = max(len(current_release), len(minimum_release))
    left = current_release + (0,) * (width - len(current_release))
    right = minimum_release + (0,) * (width - len(minimum_release))

    if left != right:
        return -1 if left < right else 1
    if current_stage != minimum_stage:
        return -1 if current_stage < minimum_stage else 1
    return 0


def require_version(current: str | None, minimum: str) -> None:
    """Raise when the host is older than ``minimum``; unknown hosts pass."""
    if current is None:
        return
    try:
        older = wp_version_compare(current, minimum) < 0
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    if older:
        raise VersionRequirementError(f"Requires WordPress {minimum} or greater.")


def require_family(current: str | None, family: str) -> None:
    require_version(current, FAMILY_REQUIREMENTS[family])


__all__ = [
    "FAMILY_REQUIREMENTS",
    "parse_version",
    "require_family",
    "require_version",
    "wp_version_compare",
]
