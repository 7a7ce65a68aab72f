"""Requirements file parsing and lookup helpers."""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Set, Tuple

from pip_requirements_parser import (
    CommentLine,
    InstallationError,
    OptionParsingError,
    get_file_content,
    get_line_parser,
    preprocess,
)

from setupscan.models import Position
from setupscan.utils.exceptions import RequirementsFileError

logger = logging.getLogger(__name__)


def _parsed_lines(content: str) -> Iterator[Tuple[str, object]]:
    """
    Yield ``(requirement, options)`` for each logical line of ``content``.

    Continuations, comments and per-line options (``--hash``, ``-e``,
    ``-r`` ...) are handled by pip's own line parser, so ``requirement``
    is the bare specifier, or an empty string for option-only lines.
    """
    parse_line = get_line_parser()
    for numbered_line in preprocess(content):
        if isinstance(numbered_line, CommentLine):
            continue
        line_number, line = numbered_line
        try:
            requirement, options, _ = parse_line(line)
        except (OptionParsingError, ValueError) as e:
            logger.warning(f"Skipping unparseable requirements line {line_number}: {line!r} ({e})")
            continue
        yield requirement.strip(), options


def parse_requirements_text(text: str) -> List[str]:
    """
    Return dependency specifiers declared in requirements file text.

    Comments, blank lines and option lines (``-e``, ``-r``,
    ``--index-url`` ...) are dropped. Declaration order is preserved.
    """
    return [requirement for requirement, _ in _parsed_lines(text) if requirement]


def parse_requirements_file(path, _seen: Optional[Set[Path]] = None) -> List[str]:
    """
    Parse a requirements file, following ``-r`` includes.

    Args:
        path: Requirements file to read
        _seen: Files already on the include stack

    Raises:
        RequirementsFileError: the file (or an included file) is missing,
            or the includes form a cycle
    """
    req_path = Path(path).resolve()
    seen = set() if _seen is None else _seen
    if req_path in seen:
        raise RequirementsFileError("Requirements include cycle detected", file_path=str(path))
    seen.add(req_path)

    try:
        content = get_file_content(str(req_path))
    except InstallationError as e:
        raise RequirementsFileError(
            "Failed to read requirements file",
            file_path=str(path),
            original_exception=e,
        )

    specifiers = []
    for requirement, options in _parsed_lines(content):
        if requirement:
            specifiers.append(requirement)
            continue
        for include in options.requirements:
            included = req_path.parent / include.lstrip("=")
            logger.debug(f"Following requirements include {included} from {req_path}")
            specifiers.extend(parse_requirements_file(included, seen))

    seen.discard(req_path)
    return specifiers


def find_dependency_position(text: str, name: str) -> Optional[Position]:
    """
    Locate the first occurrence of a package name in requirements text.

    Matching is case-insensitive and only on whole names, so ``requests``
    does not match inside ``requests-oauthlib``.
    """
    pattern = re.compile(r"(?<![\w.-])%s(?![\w.-])" % re.escape(name), re.IGNORECASE)
    match = pattern.search(text)
    if not match:
        return None
    return Position.from_offset(text, match.start())
