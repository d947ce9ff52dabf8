"""Builders for the ``{statusCode, data?, error?, message}`` response envelope."""
from http import HTTPStatus
from typing import Any


def success(status_code: int, data: Any, message: str) -> dict:
    return {"statusCode": status_code, "data": data, "message": message}


def failure(status_code: int, message: str, error: str | None = None) -> dict:
    """
    Build an error body.

    *error* defaults to the standard reason phrase of *status_code*
    (``"Bad Request"``, ``"Unauthorized"`` ...).
    """
    if error is None:
        error = HTTPStatus(status_code).phrase
    return {"statusCode": status_code, "error": error, "message": message}
