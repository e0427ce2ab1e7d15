import re

import pytest
from click.testing import CliRunner
from hypothesis import settings

import mediatypes.cli

settings.register_profile("CI", max_examples=2000)

# Valid regex, without any named groups
BROKEN_MATCH_RE = re.compile(r"^.*$")
# Valid regex that never matches a media type
NEVER_MATCHES_RE = re.compile(r"^THISWILLNEVERMATCH$")


@pytest.fixture
def broken_match_re():
    return BROKEN_MATCH_RE


@pytest.fixture
def never_matches_re():
    return NEVER_MATCHES_RE


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """CLI runner helper.

    Provides in-process execution via `click.CliRunner`. Runs in an empty directory, so a
    configuration file is only picked up when passed explicitly.
    """
    import tomli_w

    cli_runner = CliRunner()
    workdir = tmp_path / "work"
    workdir.mkdir()
    # Stop configuration discovery here
    (workdir / ".git").mkdir()
    monkeypatch.chdir(workdir)

    class Runner:
        @staticmethod
        def main(*args, config=None, **kwargs):
            if config is not None:
                path = tmp_path / "mediatypes.toml"
                path.write_text(tomli_w.dumps(config), encoding="utf-8")
                args = ["--config-file", str(path), *args]
            return cli_runner.invoke(mediatypes.cli.mediatypes, args, catch_exceptions=False, **kwargs)

    return Runner()
