"""Shared click options for semtag commands."""

from typing import Callable
import click

from ..semver import Scope


def plain_option(func: Callable) -> Callable:
    return click.option(
        "--plain",
        "-p",
        is_flag=True,
        default=False,
        help="Output versions without the prefix (e.g., 1.2.0 instead of v1.2.0).",
    )(func)


def release_options(func: Callable) -> Callable:
    """Add the options shared by the final/alpha/beta/candidate commands.

    Provides:
    - -s/--scope: major, minor, patch or auto
    - -v/--version: explicit version to tag
    - -o/--output-only: print the version, do not tag
    - -f/--force: skip the dirty tree and no new commits checks
    - -p/--plain: no version prefix
    - --push/--no-push: override the push setting from the config
    """
    func = click.option(
        "--push/--no-push",
        "push",
        default=None,
        help="Push the new tag to the remote (default: from config, enabled).",
    )(func)

    func = plain_option(func)

    func = click.option(
        "--force",
        "-f",
        is_flag=True,
        default=False,
        help="Tag even if the working tree is dirty or there are no new commits.",
    )(func)

    func = click.option(
        "--output-only",
        "-o",
        is_flag=True,
        default=False,
        help="Only print the next version, do not create or push a tag.",
    )(func)

    func = click.option(
        "--version",
        "-v",
        "explicit_version",
        default=None,
        help="Tag this version instead of computing one. It must be greater than the last version.",
    )(func)

    func = click.option(
        "--scope",
        "-s",
        type=click.Choice([scope.value for scope in Scope]),
        default=None,
        help="Version component to bump (default: from config, auto).",
    )(func)

    return func
