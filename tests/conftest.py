import json

import pytest

from versync.util import log
from versync.versync_config import create_config


@pytest.fixture(autouse=True)
def reset_logging():
    # run() reconfigures the module-level logger, so restore it for the next test
    yield
    log.configure(colorize=True, level="INFO")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A working directory laid out the way the default settings expect."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "backend").mkdir()
    (tmp_path / "frontend").mkdir()
    (tmp_path / "backend" / "package.json").write_text(
        json.dumps({"name": "backend", "version": "1.0.0", "private": True,
                    "scripts": {"start": "node server.js"}}, indent=2) + "\n"
    )
    (tmp_path / "frontend" / "package.json").write_text(
        json.dumps({"name": "frontend", "version": "1.0.0",
                    "dependencies": {"react": "^18.2.0"}}, indent=2) + "\n"
    )
    return tmp_path


@pytest.fixture
def conf(project):
    return create_config()
