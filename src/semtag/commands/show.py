import click
import sys

from ..app import AppContext
from ..errors import SemtagError
from ..utils.options import plain_option


@click.command()
@click.pass_obj
@plain_option
def getfinal(app: AppContext, plain: bool):
    """Print the current final version."""
    try:
        click.echo(app.format_version(app.get_final(), plain))
    except SemtagError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.pass_obj
@plain_option
def getlast(app: AppContext, plain: bool):
    """Print the last tagged version, pre-releases included."""
    try:
        click.echo(app.format_version(app.get_last(), plain))
    except SemtagError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.pass_obj
@plain_option
def getcurrent(app: AppContext, plain: bool):
    """Print the version of the working tree.

    On a clean tree at the last tag this is the last version. Otherwise it is
    a development version of the final version with the number of commits
    since it, the branch (when not the default branch) and the commit hash:

    \b
        v1.2.0-dev.3+feature-x.abc1234
    """
    try:
        click.echo(app.get_current(plain))
    except SemtagError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.pass_obj
@plain_option
def get(app: AppContext, plain: bool):
    """Print the final, last and current versions."""
    try:
        tags = app.load_tags()
        click.echo(f"Current final version: {app.format_version(tags.final_max, plain)}")
        click.echo(f"Last tagged version:   {app.format_version(tags.last, plain)}")
        click.echo(f"Working tree version:  {app.get_current(plain)}")
    except SemtagError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
