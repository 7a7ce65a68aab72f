"""Tests for the dependency data model."""

from packaging.specifiers import SpecifierSet

from setupscan.models import DependencySpecifier, InlineStatus, PackageDescriptor, Position


class TestDependencySpecifier:

    def test_pinned(self):
        spec = DependencySpecifier.parse("fire==0.1.3")

        assert spec.name == "fire"
        assert spec.specifier == "==0.1.3"
        assert spec.raw == "fire==0.1.3"

    def test_range(self):
        spec = DependencySpecifier.parse("matplotlib>=2.2.0,<2.4.0")

        assert spec.name == "matplotlib"
        assert SpecifierSet(spec.specifier) == SpecifierSet(">=2.2.0,<2.4.0")

    def test_wildcard_and_compatible_release(self):
        assert DependencySpecifier.parse("newrelic==2.0.*").specifier == "==2.0.*"
        assert DependencySpecifier.parse("jupyter~=1.1.1").specifier == "~=1.1.1"

    def test_unversioned(self):
        spec = DependencySpecifier.parse("  PyYAML ")

        assert spec.name == "PyYAML"
        assert spec.specifier == ""
        assert spec.raw == "PyYAML"

    def test_extras_and_marker(self):
        spec = DependencySpecifier.parse('requests[socks,security]>=2.8; python_version < "3.8"')

        assert spec.extras == ["security", "socks"]
        assert spec.marker == 'python_version < "3.8"'

    def test_invalid_keeps_raw(self):
        spec = DependencySpecifier.parse("legacy-pkg >= = 1")

        assert spec.name == "legacy-pkg"
        assert spec.raw == "legacy-pkg >= = 1"
        assert spec.specifier == ">= = 1"


class TestPackageDescriptor:

    def test_specifiers(self):
        descriptor = PackageDescriptor(
            install_requires=["a==1", "b"],
            inline_status=InlineStatus.DECLARED,
        )

        assert [s.name for s in descriptor.specifiers()] == ["a", "b"]
        assert descriptor.has_inline_dependencies

    def test_external_has_no_specifiers(self):
        descriptor = PackageDescriptor(inline_status=InlineStatus.EXTERNAL, requirements_file="r.txt")

        assert descriptor.specifiers() == []
        assert not descriptor.has_inline_dependencies


def test_position_from_offset():
    text = "ab\ncd\nef"

    assert Position.from_offset(text, 0) == Position(0, 0)
    assert Position.from_offset(text, 4) == Position(1, 1)
    assert Position.from_offset(text, 6) == Position(2, 0)
