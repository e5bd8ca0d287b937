import click
import logging
import sys
import yaml
from .app import AppContext
from .config import load_config
from .errors import SemtagError
from .repository.git_repo import GitRepository
from .version import __version__

LOG_FORMAT = "[%(levelname)s] %(message)s"

from dotenv import load_dotenv

load_dotenv()


def register_commands(cli):
    from .commands.show import getfinal, getlast, getcurrent, get

    cli.add_command(getfinal)
    cli.add_command(getlast)
    cli.add_command(getcurrent)
    cli.add_command(get)

    from .commands.release import final, alpha, beta, candidate

    cli.add_command(final)
    cli.add_command(alpha)
    cli.add_command(beta)
    cli.add_command(candidate)


@click.group()
@click.pass_obj
@click.option(
    "--repo-path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    default=".",
    help="Path to the git repository",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="SEMTAG_CONFIG",
    default=None,
    help="Path to the config file (default: .semtag.yaml in the repository root)",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.version_option(__version__, prog_name="semtag")
def cli(app: AppContext, repo_path: str, config_path: str, verbose: bool):
    """Tag git repositories with semantic versions."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if app.repository is None:
            app.repository = GitRepository.open(repo_path)
        if app.config is None:
            root = None
            if isinstance(app.repository, GitRepository):
                root = app.repository.repo.working_tree_dir
            app.config = load_config(config_path, root=root)
    except (SemtagError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if isinstance(app.repository, GitRepository):
        app.repository.remote = app.config.tag.remote


def main():
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
    )
    register_commands(cli)
    cli(obj=AppContext())


if __name__ == "__main__":
    main()
