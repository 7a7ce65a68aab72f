"""Tests for project-level dependency extraction."""

import shutil
import tempfile
from pathlib import Path

from setupscan.extract import extract
from setupscan.extractors.python.extractor import PythonExtractor

FIXTURES = Path(__file__).parent / "fixtures"


def copy_fixture_project(name: str, target: Path) -> Path:
    project = target / name
    shutil.copytree(FIXTURES / name, project)
    return project


class TestPythonExtractor:
    """Test the PythonExtractor class."""

    def test_can_extract(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            extractor = PythonExtractor(temp_dir)
            assert not extractor.can_extract()

            Path(temp_dir, "dev-requirements.txt").write_text("pytest\n")
            assert extractor.can_extract()

    def test_excluded_directories_are_skipped(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            vendored = Path(temp_dir) / ".venv" / "lib" / "pkg"
            vendored.mkdir(parents=True)
            (vendored / "setup.py").write_text("from setuptools import setup\nsetup(install_requires=['x'])\n")
            node_modules = Path(temp_dir) / "node_modules" / "thing"
            node_modules.mkdir(parents=True)
            (node_modules / "requirements.txt").write_text("y\n")

            assert PythonExtractor(temp_dir).get_dependency_files() == []

    def test_setup_with_inline_dependencies(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            shutil.copy(FIXTURES / "regex" / "setupAllKindOfDepsVariations.py", Path(temp_dir) / "setup.py")

            result = PythonExtractor(temp_dir).extract_dependencies()

            deps = result["dependencies"]["setup.py"]
            assert list(deps) == ["PyYAML", "fire", "matplotlib", "newrelic", "jupyter", "numpy"]
            assert deps["fire"] == "==0.1.3"
            assert deps["PyYAML"] == ""

            package_file = result["dependencies_analysis"]["package_files"][0]
            assert package_file["name"] == "example"
            assert package_file["inline_status"] == "declared"
            assert package_file["packages"][2] == "matplotlib>=2.2.0,<2.4.0"
            assert result["dependencies_analysis"]["total_packages"] == 6

    def test_setup_follows_requirements_file(self):
        """A setup.py reading requirements.txt reports that file's packages."""
        with tempfile.TemporaryDirectory() as temp_dir:
            project = copy_fixture_project("setupAndRequirements", Path(temp_dir))

            result = PythonExtractor(str(project)).extract_dependencies()

            setup_entry = next(
                pf for pf in result["dependencies_analysis"]["package_files"] if pf["path"] == "setup.py"
            )
            assert setup_entry["inline_status"] == "external"
            assert setup_entry["requirements_file"] == "requirements.txt"
            assert setup_entry["resolved_from"] == "requirements.txt"
            assert setup_entry["packages"] == ["PyYAML", "fire==0.1.3", "newrelic==2.0.*"]
            assert result["dependencies"]["setup.py"]["newrelic"] == "==2.0.*"
            assert result["dependencies"]["requirements.txt"]["fire"] == "==0.1.3"

    def test_following_requirements_can_be_disabled(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            project = copy_fixture_project("setupAndRequirements", Path(temp_dir))
            config = {"scan": {"follow_requirements_files": False}}

            result = PythonExtractor(str(project), config).extract_dependencies()

            assert result["dependencies"]["setup.py"] == {}

    def test_missing_requirements_file_is_reported_without_packages(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            shutil.copy(FIXTURES / "regex" / "setupNoDepFound.py", Path(temp_dir) / "setup.py")

            result = PythonExtractor(temp_dir).extract_dependencies()

            entry = result["dependencies_analysis"]["package_files"][0]
            assert entry["inline_status"] == "external"
            assert entry["requirements_file"] == "requirements/prod.txt"
            assert entry["packages"] == []
            assert "resolved_from" not in entry

    def test_broken_file_does_not_stop_extraction(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            Path(temp_dir, "requirements.txt").write_text("-r missing.txt\n")
            Path(temp_dir, "setup.py").write_text("from setuptools import setup\nsetup(install_requires=['six'])\n")

            result = PythonExtractor(temp_dir).extract_dependencies()

            assert result["dependencies"] == {"setup.py": {"six": ""}}
            errors = result["dependencies_analysis"]["errors"]
            assert len(errors) == 1
            assert errors[0]["path"] == "requirements.txt"


class TestExtract:

    def test_empty_project(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            result = extract(temp_dir)

            assert result["dependencies"] == {}
            assert result["dependencies_analysis"]["total_packages"] == 0
            assert result["dependencies_analysis"]["ecosystems_detected"] == []

    def test_project(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            project = copy_fixture_project("setupAndRequirements", Path(temp_dir))

            result = extract(str(project))

            analysis = result["dependencies_analysis"]
            assert analysis["ecosystems_detected"] == ["python"]
            assert analysis["total_packages"] == 6
            assert [pf["path"] for pf in analysis["package_files"]] == ["requirements.txt", "setup.py"]
            assert analysis["resolution_details"]["pyyaml"] == ""
