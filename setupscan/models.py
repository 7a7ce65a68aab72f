import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from packaging.requirements import InvalidRequirement, Requirement

logger = logging.getLogger(__name__)

_LEADING_NAME = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")


class InlineStatus(str, Enum):
    """How a descriptor declares its install_requires."""
    DECLARED = "declared"
    EXTERNAL = "external"
    ABSENT = "absent"


class Position(NamedTuple):
    """Zero-based line and character offset inside a text document."""
    line: int
    character: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "Position":
        line = text.count("\n", 0, offset)
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(line, offset - line_start)


@dataclass
class DependencySpecifier:
    """A declared dependency split into name and version constraint."""
    raw: str
    name: str
    specifier: str = ""
    extras: List[str] = field(default_factory=list)
    marker: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> "DependencySpecifier":
        """Build a specifier from its declared string form.

        Strings that packaging rejects keep their raw text and take the
        leading identifier as the name.
        """
        raw = raw.strip()
        try:
            req = Requirement(raw)
        except InvalidRequirement as e:
            logger.warning(f"Failed to parse dependency specifier '{raw}': {e}")
            match = _LEADING_NAME.match(raw)
            name = match.group(1) if match else raw
            return cls(raw=raw, name=name, specifier=raw[len(name):].strip())

        return cls(
            raw=raw,
            name=req.name,
            specifier=str(req.specifier),
            extras=sorted(req.extras),
            marker=str(req.marker) if req.marker else None,
        )


@dataclass
class PackageDescriptor:
    """Static view of a setup script's setup() call."""
    name: Optional[str] = None
    version: Optional[str] = None
    install_requires: Optional[List[str]] = None
    inline_status: InlineStatus = InlineStatus.ABSENT
    requirements_file: Optional[str] = None
    path: Optional[str] = None

    @property
    def has_inline_dependencies(self) -> bool:
        return self.inline_status == InlineStatus.DECLARED

    def specifiers(self) -> List[DependencySpecifier]:
        """Parsed form of install_requires, empty when not declared inline."""
        return [DependencySpecifier.parse(dep) for dep in self.install_requires or []]
