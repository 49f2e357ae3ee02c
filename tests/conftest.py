"""Shared test fixtures."""

import subprocess

import pytest

from yank.git.executor import GitExecutor
from yank.models.state import YankContext, YankRequest

SHA_1 = "1" * 40
SHA_2 = "2" * 40
SHA_BASE = "f" * 40


def completed(returncode: int = 0, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess([], returncode, stdout=stdout, stderr=stderr)


def git_calls(mock) -> list[tuple[str, ...]]:
    """Git argv (without the leading 'git') for every subprocess.run call."""
    return [tuple(c.args[0][1:]) for c in mock.call_args_list]


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = completed()
    return mock


@pytest.fixture
def fake_git(mocker):
    """Patch git invocations with responses looked up by argv prefix.

    Set `fake_git.responses[("cherry-pick",)] = completed(1, stderr="...")`.
    A value may also be a callable taking the git args and returning a
    CompletedProcess. Longest matching prefix wins; unmatched calls succeed.
    """
    responses: dict[tuple[str, ...], object] = {}

    def run(argv, **kwargs):
        args = tuple(argv[1:])
        for prefix in sorted(responses, key=len, reverse=True):
            if args[: len(prefix)] == prefix:
                value = responses[prefix]
                return value(args) if callable(value) else value
        return completed()

    mock = mocker.patch("yank.git.executor.subprocess.run", side_effect=run)
    mock.responses = responses
    return mock


@pytest.fixture
def repo_git(fake_git):
    """fake_git describing a repo on 'feature' holding c1 (older) and c2 (newer)."""
    shas = {"c1": SHA_1, "c2": SHA_2}

    def resolve(args):
        ref = args[-1].removesuffix("^{commit}")
        if ref in shas:
            return completed(stdout=f"{shas[ref]}\n")
        return completed(1)

    fake_git.responses[("rev-parse", "--abbrev-ref", "HEAD")] = completed(stdout="feature\n")
    fake_git.responses[("rev-parse", "--verify")] = resolve
    fake_git.responses[("status",)] = completed(stdout="")
    fake_git.responses[("rev-list",)] = completed(stdout=f"{SHA_2}\n{SHA_1}\n{SHA_BASE}\n")
    return fake_git


@pytest.fixture
def sample_request():
    """Two commits to feature/x from main, removal enabled."""
    return YankRequest(
        commits=("c1", "c2"),
        destination_branch="feature/x",
        start_point="main",
    )


@pytest.fixture
def sample_context(sample_request):
    return YankContext(request=sample_request, executor=GitExecutor())


@pytest.fixture
def reset_config_cache():
    import yank.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def reset_words_cache():
    import yank.utils.names as names

    names._words = None
    yield
    names._words = None
