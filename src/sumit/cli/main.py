"""Command-line interface for sumit."""

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sumit.core.errors import ChangelogError
from sumit.core.release import generate_changelog
from sumit.models import ChangelogConfig

console = Console(stderr=True)
# Errors are always bold red, even when stderr is redirected
error_console = Console(stderr=True, force_terminal=True, color_system="standard")


def bail(message: str) -> NoReturn:
    """Print an error in bold red on stderr and exit with status 1."""
    error_console.print(
        f"\n[bold red]error: {escape(message)}[/bold red]",
        soft_wrap=True,
        emoji=False,
        highlight=False,
    )
    sys.exit(1)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


class BailingCommand(click.Command):
    """Click command that reports every failure through ``bail``.

    Usage errors exit with status 1 instead of click's usual 2.
    """

    def main(self, args=None, prog_name=None, complete_var=None, **extra):
        extra.pop("standalone_mode", None)
        try:
            return super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.ClickException as e:
            bail(e.format_message())
        except click.Abort:
            bail("aborted")
        except ChangelogError as e:
            bail(str(e))


@click.command(cls=BailingCommand)
@click.version_option(package_name="sumit")
@click.argument("release_version", metavar="VERSION")
@click.argument("extra", nargs=-1, expose_value=False)
@click.option(
    "--dir",
    "-d",
    "directory",
    default=".",
    envvar="SUMIT_DIR",
    show_default=True,
    help="Set the working directory",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def main(release_version: str, directory: str, verbose: bool):
    """Generate a changelog entry for VERSION from the git history."""
    config = ChangelogConfig(
        version=release_version, directory=directory, verbose=verbose
    )
    setup_logging(config.verbose)
    changelog = generate_changelog(config)
    # Titles go out verbatim, escape sequences included
    click.echo(changelog, nl=False, color=True)


if __name__ == "__main__":
    main()
