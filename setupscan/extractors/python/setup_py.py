"""
Static extraction of dependencies from setup.py scripts.

The script is never executed. The primary strategy walks the AST of the
script looking for a ``setup(...)`` / ``setuptools.setup(...)`` call; when
the script is not valid Python 3 (legacy Python 2 setup scripts are still
common) a regex scan over the raw text is used instead.
"""

import ast
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Tuple

from setupscan.models import InlineStatus, PackageDescriptor, Position
from setupscan.utils.exceptions import (
    InstallRequiresNotFoundError,
    NoInlineDependenciesError,
    SetupScanError,
)

logger = logging.getLogger(__name__)

SETUP_FUNCTION = "setup"
INSTALL_REQUIRES = "install_requires"

# Bound on how many names/calls are followed when resolving a value.
MAX_RESOLVE_DEPTH = 10

_INSTALL_REQUIRES_RE = re.compile(r"\binstall_requires\s*=(?!=)")
_COMMENT_SUFFIX_RE = re.compile(r"(^|\s)#.*$")
_LITERAL_TOKEN_RE = re.compile(
    r"""(?P<q>['"])(?P<s>(?:\\.|(?!(?P=q))[^\\\n])*)(?P=q)"""
    r"""|(?P<c>\#[^\n]*)"""
    r"""|(?P<open>[\[(])"""
    r"""|(?P<close>[\])])"""
)
_VALUE_TOKEN_RE = re.compile(
    r"""(?P<q>['"])(?:\\.|(?!(?P=q))[^\\\n])*(?P=q)"""
    r"""|\#[^\n]*"""
    r"""|(?P<open>[\[({])"""
    r"""|(?P<close>[\])}])"""
    r"""|(?P<comma>,)"""
)
_REQUIREMENTS_PATH_RE = re.compile(r"""['"]([^'"\n]+\.(?:txt|in))['"]""")


def strip_comment(entry: str) -> str:
    """Trim an entry and drop any ``# ...`` suffix."""
    return _COMMENT_SUFFIX_RE.sub("", entry).strip()


def _split_lines(value: str) -> List[str]:
    """setuptools accepts a newline separated string for install_requires."""
    return [line for line in (strip_comment(raw) for raw in value.splitlines()) if line]


class _SetupCallAnalyzer:
    """Reads the setup() call and module-level bindings out of a parsed script."""

    def __init__(self, tree: ast.Module):
        self.tree = tree
        self.assignments: Dict[str, ast.expr] = {}
        self._collect_assignments(tree.body)

    def _collect_assignments(self, body: List[ast.stmt]):
        # Function and class bodies are skipped, module-level control flow is not.
        for stmt in body:
            if isinstance(stmt, ast.Assign):
                for target in stmt.targets:
                    if isinstance(target, ast.Name):
                        self.assignments[target.id] = stmt.value
            elif isinstance(stmt, ast.AnnAssign):
                if isinstance(stmt.target, ast.Name) and stmt.value is not None:
                    self.assignments[stmt.target.id] = stmt.value
            elif isinstance(stmt, ast.With):
                for item in stmt.items:
                    if isinstance(item.optional_vars, ast.Name):
                        self.assignments[item.optional_vars.id] = item.context_expr
                self._collect_assignments(stmt.body)
            elif isinstance(stmt, ast.If):
                self._collect_assignments(stmt.body)
                self._collect_assignments(stmt.orelse)
            elif isinstance(stmt, ast.Try):
                self._collect_assignments(stmt.body)
                for handler in stmt.handlers:
                    self._collect_assignments(handler.body)
                self._collect_assignments(stmt.orelse)
                self._collect_assignments(stmt.finalbody)

    def find_setup_call(self) -> Optional[ast.Call]:
        for node in ast.walk(self.tree):
            if not isinstance(node, ast.Call):
                continue
            func = node.func
            if isinstance(func, ast.Name) and func.id == SETUP_FUNCTION:
                return node
            if isinstance(func, ast.Attribute) and func.attr == SETUP_FUNCTION:
                return node
        return None

    def keywords(self, call: ast.Call) -> Dict[str, ast.expr]:
        """Keyword arguments of the call, including ``**dict`` expansions."""
        result: Dict[str, ast.expr] = {}
        for kw in call.keywords:
            if kw.arg is not None:
                result[kw.arg] = kw.value
                continue
            expanded = self._follow_name(kw.value)
            if isinstance(expanded, ast.Dict):
                for key, value in zip(expanded.keys, expanded.values):
                    key_str = self.string_value(key) if key is not None else None
                    if key_str:
                        result[key_str] = value
            elif isinstance(expanded, ast.Call) and isinstance(expanded.func, ast.Name) and expanded.func.id == "dict":
                for inner in expanded.keywords:
                    if inner.arg is not None:
                        result[inner.arg] = inner.value
            else:
                logger.debug("Skipping unresolvable **kwargs expansion in setup() call")
        return result

    def _follow_name(self, node: ast.expr, depth: int = 0) -> ast.expr:
        while isinstance(node, ast.Name) and node.id in self.assignments and depth < MAX_RESOLVE_DEPTH:
            node = self.assignments[node.id]
            depth += 1
        return node

    def string_value(self, node: ast.expr) -> Optional[str]:
        node = self._follow_name(node)
        if isinstance(node, ast.Constant) and isinstance(node.value, str):
            return node.value
        return None

    def inline_list(self, node: ast.expr) -> Optional[List[str]]:
        """Entries of a list/tuple literal, or None when the value is not one."""
        node = self._follow_name(node)
        if not isinstance(node, (ast.List, ast.Tuple)):
            return None

        entries = []
        for elt in node.elts:
            value = self.string_value(elt)
            if value is None:
                logger.warning(
                    f"Skipping non-literal install_requires entry at line {getattr(elt, 'lineno', '?')}"
                )
                continue
            cleaned = strip_comment(value)
            if cleaned:
                entries.append(cleaned)
        return entries

    def resolve_path(self, node: Optional[ast.AST], depth: int = 0) -> Optional[str]:
        """Best-effort static resolution of the file a value is read from."""
        if node is None or depth > MAX_RESOLVE_DEPTH:
            return None

        if isinstance(node, ast.Constant):
            return node.value if isinstance(node.value, str) else None

        if isinstance(node, ast.Name):
            bound = self.assignments.get(node.id)
            return self.resolve_path(bound, depth + 1) if bound is not None else None

        if isinstance(node, ast.Call):
            func = node.func
            func_name = func.attr if isinstance(func, ast.Attribute) else getattr(func, "id", "")
            if func_name == "join":
                parts = [p for p in (self.resolve_path(arg, depth + 1) for arg in node.args) if p]
                return PurePosixPath(*parts).as_posix() if parts else None

            # Keyword arguments (mode, encoding) are never taken as the path.
            for arg in node.args:
                resolved = self.resolve_path(arg, depth + 1)
                if resolved:
                    return resolved

            # open("requirements.txt").read().splitlines()
            if isinstance(func, ast.Attribute):
                return self.resolve_path(func.value, depth + 1)
            return None

        if isinstance(node, ast.Attribute):
            return self.resolve_path(node.value, depth + 1)

        if isinstance(node, ast.BinOp):
            return self.resolve_path(node.left, depth + 1) or self.resolve_path(node.right, depth + 1)

        if isinstance(node, (ast.ListComp, ast.GeneratorExp, ast.SetComp)):
            for generator in node.generators:
                resolved = self.resolve_path(generator.iter, depth + 1)
                if resolved:
                    return resolved
            return None

        if isinstance(node, ast.Starred):
            return self.resolve_path(node.value, depth + 1)

        return None

    def descriptor(self, path: Optional[str] = None) -> PackageDescriptor:
        call = self.find_setup_call()
        if call is None:
            logger.debug(f"No setup() call found in {path or '<text>'}")
            return PackageDescriptor(path=path)

        keywords = self.keywords(call)
        descriptor = PackageDescriptor(
            name=self.string_value(keywords["name"]) if "name" in keywords else None,
            version=self.string_value(keywords["version"]) if "version" in keywords else None,
            path=path,
        )

        value = keywords.get(INSTALL_REQUIRES)
        if value is None:
            return descriptor

        entries = self.inline_list(value)
        if entries is None:
            as_string = self.string_value(value)
            if as_string is not None:
                entries = _split_lines(as_string)

        if entries is not None:
            descriptor.install_requires = entries
            descriptor.inline_status = InlineStatus.DECLARED
        else:
            descriptor.inline_status = InlineStatus.EXTERNAL
            descriptor.requirements_file = self.resolve_path(value)
        return descriptor


def _scan_bracketed_strings(text: str, start: int) -> Optional[List[str]]:
    """Collect top-level string literals of the bracket opening at ``start``."""
    entries = []
    depth = 0
    for match in _LITERAL_TOKEN_RE.finditer(text, start):
        if match.group("open"):
            depth += 1
        elif match.group("close"):
            depth -= 1
            if depth == 0:
                return entries
        elif match.group("q") and depth == 1:
            cleaned = strip_comment(match.group("s"))
            if cleaned:
                entries.append(cleaned)
    # Unbalanced brackets
    return None


def _value_end(text: str, start: int) -> int:
    """Offset of the first top-level ``,`` or closing bracket after ``start``."""
    depth = 0
    for match in _VALUE_TOKEN_RE.finditer(text, start):
        if match.group("open"):
            depth += 1
        elif match.group("close"):
            if depth == 0:
                return match.start()
            depth -= 1
        elif match.group("comma") and depth == 0:
            return match.start()
    return len(text)


def _search_install_requires(text: str) -> Optional["re.Match[str]"]:
    """First ``install_requires=`` that is not inside a ``#`` comment."""
    for match in _INSTALL_REQUIRES_RE.finditer(text):
        line_start = text.rfind("\n", 0, match.start()) + 1
        tokens = _LITERAL_TOKEN_RE.finditer(text, line_start, match.start())
        if not any(token.group("c") for token in tokens):
            return match
    return None


def _regex_keyword(text: str, keyword: str) -> Optional[str]:
    match = re.search(r"\b%s\s*=\s*(['\"])(.*?)\1" % re.escape(keyword), text)
    return match.group(2) if match else None


def _parse_with_regex(text: str, path: Optional[str] = None) -> PackageDescriptor:
    """Fallback for scripts that are not valid Python 3."""
    descriptor = PackageDescriptor(
        name=_regex_keyword(text, "name"),
        version=_regex_keyword(text, "version"),
        path=path,
    )

    match = _search_install_requires(text)
    if not match:
        return descriptor

    value_start = match.end()
    while value_start < len(text) and text[value_start].isspace():
        value_start += 1
    head = text[value_start:value_start + 1]

    entries = None
    if head in ("[", "("):
        entries = _scan_bracketed_strings(text, value_start)
    elif head in ("'", '"'):
        string_match = _LITERAL_TOKEN_RE.match(text, value_start)
        if string_match and string_match.group("q"):
            entries = _split_lines(string_match.group("s").replace("\\n", "\n"))

    if entries is not None:
        descriptor.install_requires = entries
        descriptor.inline_status = InlineStatus.DECLARED
    else:
        descriptor.inline_status = InlineStatus.EXTERNAL
        path_match = _REQUIREMENTS_PATH_RE.search(text, value_start, _value_end(text, value_start))
        descriptor.requirements_file = path_match.group(1) if path_match else None
    return descriptor


def parse_descriptor(text: str, path: Optional[str] = None) -> PackageDescriptor:
    """
    Statically read name, version and install_requires from setup script text.

    Args:
        text: Content of the setup script
        path: Optional path, only used for reporting

    Returns:
        PackageDescriptor; ``install_requires`` is None unless the
        dependencies are declared inline.
    """
    try:
        tree = ast.parse(text)
    except (SyntaxError, ValueError) as e:
        logger.debug(f"AST parsing failed for {path or '<text>'}, using regex fallback: {e}")
        return _parse_with_regex(text, path)
    return _SetupCallAnalyzer(tree).descriptor(path)


def extract_install_requires(text: str, path: Optional[str] = None) -> List[str]:
    """
    Return the inline install_requires entries of a setup script, in order.

    Raises:
        NoInlineDependenciesError: install_requires is computed, e.g. read
            from a requirements file
        InstallRequiresNotFoundError: there is no install_requires keyword
    """
    descriptor = parse_descriptor(text, path)

    if descriptor.inline_status == InlineStatus.EXTERNAL:
        raise NoInlineDependenciesError(
            file_path=path,
            requirements_file=descriptor.requirements_file,
        )
    if descriptor.inline_status == InlineStatus.ABSENT:
        raise InstallRequiresNotFoundError(file_path=path)
    return list(descriptor.install_requires or [])


def load_descriptor(path) -> PackageDescriptor:
    """Read and parse a setup script from disk."""
    setup_path = Path(path)
    try:
        text = setup_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SetupScanError(
            "Failed to read setup script",
            file_path=str(setup_path),
            original_exception=e,
        )
    return parse_descriptor(text, str(setup_path))


def find_install_requires_position(text: str) -> Optional[Tuple[Position, Position]]:
    """
    Locate the ``install_requires=`` token.

    Returns:
        (start, end) positions of the token, or None when it is absent
    """
    match = _search_install_requires(text)
    if not match:
        return None
    return Position.from_offset(text, match.start()), Position.from_offset(text, match.end())
