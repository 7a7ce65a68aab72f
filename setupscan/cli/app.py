"""
Main CLI application for setupscan.

Defines the Typer application structure and command routing,
keeping the CLI layer thin.
"""
import typer

from setupscan.cli.commands.check_venv import check_venv_command
from setupscan.cli.commands.scan import inspect_command, scan_command
from setupscan.cli.commands.update import update_command


app = typer.Typer(help="setupscan - static dependency extraction for setup.py projects")

app.command("scan", help="Extract declared dependencies from setup.py and requirements files.")(scan_command)
app.command("inspect", help="Show the inline install_requires of one setup script.")(inspect_command)
app.command("update", help="Pin a dependency to a fixed version inside a dependency file.")(update_command)
app.command("check-venv", help="Check whether an interpreter runs inside a virtual environment.")(check_venv_command)


# Make scan the default command when no subcommand is specified
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """setupscan - static dependency extraction for setup.py projects.

    Run 'setupscan scan' to list the dependencies of a project.
    Run 'setupscan inspect setup.py' to read a single setup script.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(
            scan_command,
            project_path=".",
            config_path=None,
            output=None,
            python_path=None,
            as_json=False,
            log_level=None,
        )
