import pytest

from git_commit_message.config import Config

from helpers import ANSI_RE


@pytest.fixture
def config():
    return Config(ollama_url="http://localhost:11434", model="llama3.2:3b", temperature=0.2)


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at an empty directory and return it."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    return home
