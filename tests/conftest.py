from typing import Optional

import pytest
from click.testing import CliRunner

from semtag.app import AppContext
from semtag.config import SemtagConfig
from semtag.main import cli, register_commands
from semtag.repository.base import TagRepository

from .fakes import FakeRepository


@pytest.fixture
def fake_repo():
    return FakeRepository(tags=["v0.2.0"])


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner):
    """Run the semtag CLI against an in-memory repository."""
    register_commands(cli)

    def _invoke(repository: TagRepository, *args, config: Optional[SemtagConfig] = None):
        app = AppContext(repository=repository, config=config or SemtagConfig())
        return runner.invoke(cli, list(args), obj=app)

    return _invoke
