"""
In-place version updates for declared dependencies.

Rewrites the version constraint of one package inside a setup script or
requirements file, e.g. ``requests [security] >= 2.8.1, == 2.8.*`` becomes
``requests [security]==2.9.0``.
"""

import logging
import re
from pathlib import Path

from setupscan.utils.exceptions import SetupScanError

logger = logging.getLogger(__name__)

# Operators and versions: ">= 2.8.1, == 2.8.*"
_CONSTRAINTS = r"(?:[ \t]*(?:[<>]=?|!=|===?|~=)[ \t]*[\w*.+!-]+[ \t]*,?)*"


def _package_pattern(name: str) -> "re.Pattern[str]":
    # Normalized names treat runs of "-", "_" and "." as equivalent.
    parts = [re.escape(part) for part in re.split(r"[-_.]+", name) if part]
    name_re = r"[-_.]+".join(parts)
    return re.compile(
        # An entry starts a line or a string literal that is not the value
        # of a keyword or dict key such as name="..."
        r"(?P<lead>^[ \t]*|(?<![=:])(?<![=:] )['\"][ \t]*)"
        r"(?P<name>" + name_re + r")(?![\w.-])"
        # Optional extras: [security]
        r"(?P<extras>(?:[ \t]*\[[^\]\n]*\])?)"
        r"(?P<constraints>" + _CONSTRAINTS + r")"
        # The entry ends at a quote, comment, marker, option or end of line
        r"(?=[ \t]*(?:['\"#;,\\\r\n]|--|$))",
        re.IGNORECASE | re.MULTILINE,
    )


def replace_versions(content: str, name: str, fixed_version: str) -> str:
    """Pin every declaration of ``name`` in ``content`` to ``fixed_version``."""
    pattern = _package_pattern(name)

    def _pin(match: "re.Match[str]") -> str:
        # Separators after the last version ("2.8.*, ") are kept
        constraints = match.group("constraints")
        trailing = constraints[len(constraints.rstrip(" \t,")):]
        return f"{match.group('lead')}{match.group('name')}{match.group('extras')}=={fixed_version}{trailing}"

    return pattern.sub(_pin, content)


def update_dependency_file(path, name: str, fixed_version: str) -> bool:
    """
    Rewrite a dependency file so that ``name`` is pinned to ``fixed_version``.

    Returns:
        True if the file changed
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SetupScanError(
            "Failed to read dependency file",
            file_path=str(file_path),
            original_exception=e,
        )

    updated = replace_versions(content, name, fixed_version)
    if updated == content:
        logger.info(f"No declaration of {name} found in {file_path}")
        return False

    file_path.write_text(updated, encoding="utf-8")
    logger.info(f"Pinned {name} to {fixed_version} in {file_path}")
    return True
