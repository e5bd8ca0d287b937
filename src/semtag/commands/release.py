import click
import logging
import sys
from typing import Optional

from ..app import AppContext
from ..errors import SemtagError
from ..semver import Channel, Scope
from ..utils.options import release_options

log = logging.getLogger(__name__)


def run_release(
    app: AppContext,
    channel: Channel,
    scope: Optional[str],
    explicit_version: Optional[str],
    output_only: bool,
    force: bool,
    plain: bool,
    push: Optional[bool],
):
    try:
        version = app.parse_version(explicit_version) if explicit_version else None
        result = app.release(
            channel,
            scope=Scope(scope) if scope else None,
            explicit_version=version,
            output_only=output_only,
            force=force,
            plain=plain,
            push=push,
        )
    except SemtagError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result.no_op:
        log.info("Nothing to tag, HEAD is already at the last version")

    click.echo(app.format_version(result.version, plain))


@click.command()
@click.pass_obj
@release_options
def final(app: AppContext, **options):
    """Tag the next final version.

    \b
    Examples:
        semtag final -s minor        # v1.2.3 -> v1.3.0
        semtag final -o              # print the next version only
        semtag final -v v2.0.0       # tag an explicit version
    """
    run_release(app, Channel.FINAL, **options)


@click.command()
@click.pass_obj
@release_options
def alpha(app: AppContext, **options):
    """Tag the next alpha pre-release (e.g., v1.3.0-alpha.1)."""
    run_release(app, Channel.ALPHA, **options)


@click.command()
@click.pass_obj
@release_options
def beta(app: AppContext, **options):
    """Tag the next beta pre-release (e.g., v1.3.0-beta.1)."""
    run_release(app, Channel.BETA, **options)


@click.command()
@click.pass_obj
@release_options
def candidate(app: AppContext, **options):
    """Tag the next release candidate (e.g., v1.3.0-rc.1)."""
    run_release(app, Channel.RC, **options)
