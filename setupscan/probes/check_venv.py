"""
Exit 0 when run inside a virtual environment, 1 otherwise.

Executed by arbitrary interpreters, so this file must stay standalone.
"""
import sys


def running_in_virtualenv():
    # virtualenv < 20 sets real_prefix, venv and virtualenv >= 20 set base_prefix
    virtualenv_prefix = getattr(sys, "real_prefix", None)
    venv_prefix = getattr(sys, "base_prefix", sys.prefix)
    return bool(virtualenv_prefix) or venv_prefix != sys.prefix


def main():
    sys.exit(0 if running_in_virtualenv() else 1)


if __name__ == "__main__":
    main()
