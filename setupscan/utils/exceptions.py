"""
Exception hierarchy for setupscan.

Each exception carries:
- Clear error message
- The file being processed, when there is one
- Suggested user action
- Original exception preserved for debugging
"""

from typing import Optional


class SetupScanError(Exception):
    """
    Base exception for all setupscan errors.

    Used directly for generic failures that don't fit a more specific
    category below.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize SetupScanError.

        Args:
            message: Human-readable error message
            file_path: File being processed when the error occurred
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.file_path = file_path
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class DependenciesNotFoundError(SetupScanError):
    """
    Raised when a descriptor has no inline dependency list to report.

    Callers that only care about "were inline dependencies found" catch
    this; callers that need the reason catch one of the subclasses.
    """


class NoInlineDependenciesError(DependenciesNotFoundError):
    """
    Raised when install_requires is not an inline list literal.

    This typically indicates:
    - Dependencies loaded from a requirements file by a helper function
    - A variable bound to a computed value
    - List concatenation or comprehension
    """

    def __init__(
        self,
        message: str = "install_requires is not declared inline",
        file_path: Optional[str] = None,
        requirements_file: Optional[str] = None,
    ):
        """
        Initialize NoInlineDependenciesError.

        Args:
            message: Human-readable error message
            file_path: Descriptor being processed
            requirements_file: External requirements file the descriptor
                refers to, when it could be resolved statically
        """
        self.requirements_file = requirements_file

        if requirements_file:
            suggested_action = f"Read dependencies from {requirements_file}"
        else:
            suggested_action = "Declare install_requires as a list literal"

        super().__init__(
            message=message,
            file_path=file_path,
            suggested_action=suggested_action,
        )


class InstallRequiresNotFoundError(DependenciesNotFoundError):
    """Raised when a descriptor has no install_requires keyword at all."""

    def __init__(
        self,
        message: str = "No install_requires found in setup() call",
        file_path: Optional[str] = None,
    ):
        super().__init__(message=message, file_path=file_path)


class RequirementsFileError(SetupScanError):
    """
    Raised when a requirements file cannot be read.

    This typically indicates:
    - A missing file referenced by -r or by a setup script
    - A cycle of -r includes
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            file_path=file_path,
            original_exception=original_exception,
            suggested_action="Check that the requirements file exists and its includes are valid",
        )


class ConfigurationError(SetupScanError):
    """Raised when a configuration file is missing or malformed."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            file_path=file_path,
            original_exception=original_exception,
            suggested_action="Fix the YAML file or pass a different --config",
        )


class VirtualEnvRequiredError(SetupScanError):
    """
    Raised when a scan requires a virtual environment and none is active.

    The scan interpreter must run inside a virtualenv or venv so that the
    project's installed packages are isolated from the system interpreter.
    """

    def __init__(self, python_path: str):
        self.python_path = python_path
        super().__init__(
            message=f"Interpreter is not running inside a virtual environment: {python_path}",
            suggested_action=(
                "Create and activate a virtual environment, then install "
                "your project in it"
            ),
        )
