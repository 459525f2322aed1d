from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask

from handleradapter.interfaces.http.adapter import (
    HandlerAdapter,
    app_errors_handler,
    default_app_error,
    internal_errors_handler,
    new_default_handler_adapter,
)
from handleradapter.interfaces.http.renderers import JsonRenderer, PlainTextRenderer
from handleradapter.shared.errors import (
    ErrorInfo,
    build_error_info,
    stack_trace,
    status_error,
    unwrap,
)


class StubConfig:
    def __init__(self, *, development: bool, renderer=None) -> None:
        self.development = development
        self.reporter = MagicMock()
        self._renderer = renderer or JsonRenderer()
        self.development_checks = 0

    def is_development(self) -> bool:
        self.development_checks += 1
        return self.development

    def error_reporter(self):
        return self.reporter

    def renderer(self):
        return self._renderer


class TracedError(Exception):
    def stack_trace(self) -> str:
        return "frame-1\nframe-2"


def _raise_wrapped() -> None:
    try:
        raise ConnectionError("db unreachable")
    except ConnectionError as exc:
        raise RuntimeError("query failed") from exc


def _mount_failing(app: Flask, adapter: HandlerAdapter, exc: Exception) -> None:
    def view():
        raise exc

    app.add_url_rule("/fail", view_func=adapter.handle(view))


def test_development_mode_echoes_diagnostics(flask_app: Flask) -> None:
    config = StubConfig(development=True)
    adapter = HandlerAdapter(internal_errs=internal_errors_handler(config))

    def view():
        _raise_wrapped()

    flask_app.add_url_rule("/fail", view_func=adapter.handle(view))

    with flask_app.test_client() as client:
        response = client.get("/fail")

    assert response.status_code == 500
    payload = response.get_json()
    assert payload["error"] == "internal_error"
    assert payload["message"] == "query failed"
    assert payload["cause"] == "db unreachable"
    assert "Traceback" in payload["stack"]
    assert config.development_checks == 1


def test_production_mode_hides_diagnostics(flask_app: Flask) -> None:
    renderer = MagicMock()
    renderer.render_500.return_value = {"error": "internal_error"}
    config = StubConfig(development=False, renderer=renderer)
    adapter = HandlerAdapter(internal_errs=internal_errors_handler(config))
    _mount_failing(flask_app, adapter, RuntimeError("secret detail"))

    with flask_app.test_client() as client:
        response = client.get("/fail")

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
    renderer.render_500.assert_called_once()
    assert renderer.render_500.call_args.args[1] is None


def test_reporter_called_once_with_raw_error(flask_app: Flask) -> None:
    config = StubConfig(development=False)
    error = RuntimeError("boom")
    adapter = HandlerAdapter(internal_errs=internal_errors_handler(config))
    _mount_failing(flask_app, adapter, error)

    with flask_app.test_client() as client:
        client.get("/fail")

    config.reporter.report_error.assert_called_once()
    req, reported = config.reporter.report_error.call_args.args
    assert reported is error
    assert req.path == "/fail"


def test_internal_handler_forces_500_status(flask_app: Flask) -> None:
    renderer = MagicMock()
    renderer.render_500.return_value = ("oops", 200)
    config = StubConfig(development=False, renderer=renderer)
    adapter = HandlerAdapter(internal_errs=internal_errors_handler(config))
    _mount_failing(flask_app, adapter, ValueError("bad"))

    with flask_app.test_client() as client:
        response = client.get("/fail")

    assert response.status_code == 500
    assert response.get_data(as_text=True) == "oops"


def test_default_adapter_wiring(flask_app: Flask) -> None:
    config = StubConfig(development=False)
    adapter = new_default_handler_adapter(config)

    assert adapter.client_errs is default_app_error
    assert adapter.unauthorized_err is None
    assert adapter.internal_errs is not None

    _mount_failing(flask_app, adapter, status_error(409, "duplicate %s", "name"))

    with flask_app.test_client() as client:
        response = client.get("/fail")

    assert response.status_code == 409
    assert response.get_data(as_text=True) == "duplicate name"
    config.reporter.report_error.assert_not_called()


def test_app_errors_handler_uses_renderer(flask_app: Flask) -> None:
    config = StubConfig(development=False)
    adapter = HandlerAdapter(client_errs=app_errors_handler(config))
    _mount_failing(flask_app, adapter, status_error(404, "no such gift"))

    with flask_app.test_client() as client:
        response = client.get("/fail")

    assert response.status_code == 404
    assert response.get_json() == {"error": "no such gift", "status": 404}


def test_plain_text_renderer(flask_app: Flask) -> None:
    renderer = PlainTextRenderer()

    with flask_app.test_request_context("/fail"):
        from flask import request

        bare = renderer.render_500(request, None)
        detailed = renderer.render_500(request, ErrorInfo(message="m", cause="c"))
        client_error = renderer.render_app_error(request, status_error(400, "bad"))

    assert bare.get_data(as_text=True) == "Internal Server Error"
    assert detailed.get_data(as_text=True) == "Internal Server Error\nmessage: m\ncause: c"
    assert client_error.status_code == 400
    assert client_error.get_data(as_text=True) == "bad"


def test_unwrap_returns_explicit_cause_only() -> None:
    root = ValueError("root")
    wrapped = RuntimeError("outer")
    wrapped.__cause__ = root

    assert unwrap(wrapped) is root
    assert unwrap(root) is None


def test_build_error_info_without_cause_or_trace() -> None:
    info = build_error_info(RuntimeError("never raised"))

    assert info.to_dict() == {"message": "never raised"}


def test_stack_trace_prefers_capability() -> None:
    try:
        raise TracedError("traced")
    except TracedError as exc:
        assert stack_trace(exc) == "frame-1\nframe-2"
        assert build_error_info(exc).stack == "frame-1\nframe-2"


def test_stack_trace_formats_traceback() -> None:
    try:
        raise KeyError("missing")
    except KeyError as exc:
        trace = stack_trace(exc)

    assert trace is not None
    assert "KeyError" in trace


@pytest.mark.parametrize("development", [True, False])
def test_json_renderer_status(flask_app: Flask, development: bool) -> None:
    info = ErrorInfo(message="m") if development else None

    with flask_app.test_request_context("/fail"):
        from flask import request

        response, status = JsonRenderer().render_500(request, info)
        body = response.get_json()

    assert status == 500
    assert ("message" in body) is development
