import os
from typing import List, Optional

import pytest
from tests.utils import FakeIO

from filebug.cli.options import load_config_if_exists
from filebug.config.constants import SSH_ENV_VARS


@pytest.fixture(scope="function", autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's own config, log directory and SSH session out of tests."""
    for var in [v for v in os.environ if v.startswith("FILEBUG_")] + SSH_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.setenv("FILEBUG_CONFIG", str(tmp_path / "config.yml"))
    monkeypatch.setenv("FILEBUG_LOG_FILE_PATH", str(tmp_path / "logs" / "filebug.log"))

    load_config_if_exists.cache_clear()
    yield
    load_config_if_exists.cache_clear()


@pytest.fixture
def io() -> FakeIO:
    return FakeIO()


class BrowserRecorder:
    def __init__(self, result: bool = True, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.opened: List[str] = []

    def __call__(self, url: str, *args, **kwargs) -> bool:
        self.opened.append(url)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def browser(monkeypatch) -> BrowserRecorder:
    recorder = BrowserRecorder()
    monkeypatch.setattr("webbrowser.open", recorder)
    return recorder
