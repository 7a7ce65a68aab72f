"""
Virtual environment detection for the scan interpreter.
"""
import logging
import subprocess
import sys
from typing import Optional

from setupscan.probes import check_venv

logger = logging.getLogger(__name__)

CHECK_VENV_SCRIPT = check_venv.__file__
DEFAULT_TIMEOUT = 30


def is_in_virtual_env(
    python_path: Optional[str] = None,
    cwd: Optional[str] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> bool:
    """
    Return True iff the given interpreter runs inside a virtual environment.

    The check runs the probe script under ``python_path`` (default: the
    current interpreter) and inspects its exit code.

    Args:
        python_path: Interpreter to check
        cwd: Working directory for the probe
        timeout: Seconds to wait for the interpreter
    """
    interpreter = python_path or sys.executable
    try:
        completed = subprocess.run(
            [interpreter, CHECK_VENV_SCRIPT],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.error(f"Failed to run virtual environment probe with {interpreter}: {e}")
        return False

    logger.debug(f"Virtual environment probe for {interpreter} exited with {completed.returncode}")
    return completed.returncode == 0
