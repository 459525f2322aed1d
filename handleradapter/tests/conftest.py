from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask

from handleradapter.shared.config import load_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("METRICS_ENABLED", "false")
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    app.testing = True
    return app
