# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Request, Response, jsonify

from handleradapter.shared.errors import AppError, ErrorInfo


def plain_text_response(body: str, status: int) -> Response:
    response = Response(body, status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


class JsonRenderer:
    def render_500(self, request: Request, info: ErrorInfo | None) -> tuple[Response, int]:
        payload: dict[str, object] = {"error": "internal_error"}
        if info is not None:
            payload.update(info.to_dict())
        return jsonify(payload), HTTPStatus.INTERNAL_SERVER_ERROR

    def render_app_error(self, request: Request, error: AppError) -> tuple[Response, int]:
        return jsonify(error.to_dict()), error.status_code


class PlainTextRenderer:
    def render_500(self, request: Request, info: ErrorInfo | None) -> Response:
        lines = ["Internal Server Error"]
        if info is not None:
            lines.extend(f"{key}: {value}" for key, value in info.to_dict().items())
        return plain_text_response("\n".join(lines), HTTPStatus.INTERNAL_SERVER_ERROR)

    def render_app_error(self, request: Request, error: AppError) -> Response:
        return plain_text_response(str(error), error.status_code)


__all__ = ["JsonRenderer", "PlainTextRenderer", "plain_text_response"]
