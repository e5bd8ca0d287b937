from semtag.config import SemtagConfig, TagConfig, VersionConfig

from .fakes import FakeRepository


def last_line(result) -> str:
    return result.output.strip().splitlines()[-1]


def test_getfinal_and_getlast(invoke):
    repo = FakeRepository(tags=["v0.2.0", "v0.3.0-beta.1", "not-a-version"])

    result = invoke(repo, "getfinal")
    assert result.exit_code == 0
    assert last_line(result) == "v0.2.0"

    result = invoke(repo, "getlast", "-p")
    assert result.exit_code == 0
    assert last_line(result) == "0.3.0-beta.1"


def test_get_without_tags(invoke):
    result = invoke(FakeRepository(commits=2), "get")
    assert result.exit_code == 0
    assert "Current final version: v0.0.0" in result.output
    assert "Last tagged version:   v0.0.0" in result.output
    assert "Working tree version:  v0.0.0-dev.2+abc1234" in result.output


def test_getcurrent(invoke):
    repo = FakeRepository(tags=["v0.2.0"], commits=0)
    assert last_line(invoke(repo, "getcurrent")) == "v0.2.0"

    repo = FakeRepository(tags=["v0.2.0"], commits=3, branch="topic")
    assert last_line(invoke(repo, "getcurrent")) == "v0.2.0-dev.3+topic.abc1234"


def test_output_only_does_not_tag(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-s", "patch", "-o")
    assert result.exit_code == 0
    assert last_line(result) == "v0.2.1"
    assert fake_repo.created == []


def test_output_only_prints_candidate_when_head_is_tagged(invoke):
    repo = FakeRepository(tags=["v0.2.0", "v0.2.1-beta.1"], commits=0)
    result = invoke(repo, "beta", "-s", "patch", "-o")
    assert result.exit_code == 0
    assert last_line(result) == "v0.2.1-beta.2"
    assert repo.created == []


def test_output_only_ignores_dirty_tree(invoke):
    repo = FakeRepository(tags=["v0.2.0"], dirty=True)
    result = invoke(repo, "final", "-s", "minor", "-o")
    assert result.exit_code == 0
    assert last_line(result) == "v0.3.0"


def test_beta_creates_and_pushes_tag(invoke):
    repo = FakeRepository(tags=["v0.2.0"], subjects=["Add feature", "Fix bug"])
    result = invoke(repo, "beta", "-s", "minor")

    assert result.exit_code == 0, result.output
    assert last_line(result) == "v0.3.0-beta.1"
    assert [ref.name for ref in repo.created] == ["v0.3.0-beta.1"]
    assert repo.pushed == ["v0.3.0-beta.1"]
    assert "- Add feature" in repo.messages["v0.3.0-beta.1"]


def test_candidate_and_alpha(invoke):
    repo = FakeRepository(tags=["v1.0.0", "v1.1.0-rc.2"])
    assert last_line(invoke(repo, "candidate", "-s", "patch", "-o")) == "v1.1.0-rc.3"
    assert last_line(invoke(repo, "alpha", "-s", "patch", "-o")) == "v1.1.1-alpha.1"


def test_no_push(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-s", "patch", "--no-push")
    assert result.exit_code == 0
    assert [ref.name for ref in fake_repo.created] == ["v0.2.1"]
    assert fake_repo.pushed == []


def test_push_disabled_in_config(invoke, fake_repo):
    config = SemtagConfig(tag=TagConfig(push=False))
    result = invoke(fake_repo, "final", "-s", "patch", config=config)
    assert result.exit_code == 0
    assert fake_repo.pushed == []


def test_plain_tags(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-s", "major", "-p")
    assert last_line(result) == "1.0.0"
    assert [ref.name for ref in fake_repo.created] == ["1.0.0"]


def test_plain_from_config(invoke, fake_repo):
    config = SemtagConfig(version=VersionConfig(plain=True))
    assert last_line(invoke(fake_repo, "getfinal", config=config)) == "0.2.0"


def test_explicit_version(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-v", "v2.0.0", "-o")
    assert result.exit_code == 0
    assert last_line(result) == "v2.0.0"


def test_explicit_version_invalid(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-v", "two")
    assert result.exit_code == 1
    assert "Error: Invalid version 'two'" in result.output
    assert fake_repo.created == []


def test_explicit_version_too_low(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-v", "0.1.9")
    assert result.exit_code == 1
    assert "not greater than the last version" in result.output


def test_dirty_tree(invoke):
    repo = FakeRepository(tags=["v0.2.0"], dirty=True)
    result = invoke(repo, "final", "-s", "patch")
    assert result.exit_code == 1
    assert "uncommitted changes" in result.output
    assert repo.created == []

    result = invoke(repo, "final", "-s", "patch", "-f")
    assert result.exit_code == 0
    assert [ref.name for ref in repo.created] == ["v0.2.1"]


def test_no_new_commits(invoke):
    repo = FakeRepository(tags=["v0.2.0"], commits=0)
    result = invoke(repo, "final", "-s", "patch")
    assert result.exit_code == 0
    assert last_line(result) == "v0.2.0"
    assert repo.created == []


def test_push_failure(invoke):
    repo = FakeRepository(tags=["v0.2.0"], push_error="connection refused")
    result = invoke(repo, "final", "-s", "patch")
    assert result.exit_code == 1
    assert "created locally but pushing it failed" in result.output
    assert "v0.2.1" in repo.tags


def test_auto_scope(invoke):
    repo = FakeRepository(tags=["v0.2.0"], percentage=42.0)
    assert last_line(invoke(repo, "final", "-o")) == "v0.3.0"
    assert repo.percentage_requests == ["v0.2.0"]

    repo = FakeRepository(tags=["v0.2.0"], percentage=3.0)
    assert last_line(invoke(repo, "final", "-s", "auto", "-o")) == "v0.2.1"


def test_invalid_scope(invoke, fake_repo):
    result = invoke(fake_repo, "final", "-s", "huge")
    assert result.exit_code == 2


def test_version_option(invoke, fake_repo):
    result = invoke(fake_repo, "--version")
    assert result.exit_code == 0
    assert "semtag" in result.output
