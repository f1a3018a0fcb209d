"""Pytest configuration and shared fixtures."""

import os
import tempfile
import pytest

from envswitch.host import Host


class RecordingHost(Host):
    """Host that records what the switcher shows and answers prompts from a script."""

    def __init__(self, choice=None):
        self.choice = choice
        self.infos = []
        self.errors = []
        self.suggestions = []
        self.picks = []
        self.rendered = []

    def show_info(self, message):
        self.infos.append(message)

    def show_error(self, message, suggestions=None):
        self.errors.append(message)
        self.suggestions.append(list(suggestions or []))

    def pick(self, items, title):
        self.picks.append((title, list(items)))
        for item in items:
            if item.label == self.choice:
                return item
        return None

    def render_indicator(self, indicator):
        self.rendered.append((indicator.text, indicator.visible))


@pytest.fixture
def temp_directory():
    """Create a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    # Cleanup
    import shutil
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def host():
    """Host that cancels every prompt unless told otherwise."""
    return RecordingHost()


@pytest.fixture
def project_root(temp_directory):
    """Project folder with an empty .vscode/config-center directory."""
    root = os.path.join(temp_directory, 'project')
    os.makedirs(os.path.join(root, '.vscode', 'config-center'))
    return root


@pytest.fixture
def config_dir(project_root):
    return os.path.join(project_root, '.vscode', 'config-center')


@pytest.fixture
def write_env_files(config_dir):
    """Write environment files into the config directory."""

    def write(files):
        for name, content in files.items():
            mode = 'wb' if isinstance(content, bytes) else 'w'
            with open(os.path.join(config_dir, name), mode) as f:
                f.write(content)

    return write


@pytest.fixture(autouse=True)
def isolate_filesystem(temp_directory, monkeypatch):
    """Isolate filesystem operations to temporary directory."""
    monkeypatch.chdir(temp_directory)
    monkeypatch.delenv('ENVSWITCH_PROJECT', raising=False)
    return temp_directory


@pytest.fixture
def make_host():
    """Build a recording host that picks the given label."""
    return RecordingHost
