"""Shared plumbing for resource namespaces."""

from __future__ import annotations

from typing import Any, NoReturn, TypeVar

import httpx
import pydantic
from pydantic import BaseModel

from ._http import ClientContext, Request
from .errors import OutsetaHTTPError
from .models.wrappers import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def _handle_error_response(response: httpx.Response) -> NoReturn:
    raise OutsetaHTTPError.from_response(response)


def _validate(response: httpx.Response, model: type[ModelT]) -> ModelT:
    # A body that is not a JSON object, or does not fit the model, is reported as an HTTP error.
    try:
        payload = response.json()
    except ValueError:
        _handle_error_response(response)
    if not isinstance(payload, dict):
        _handle_error_response(response)
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise OutsetaHTTPError.from_response(response) from exc


def _paging_params(limit: int | None, offset: int | None) -> dict[str, str]:
    # Zero is treated the same as "not given".
    params: dict[str, str] = {}
    if limit:
        params["limit"] = str(limit)
    if offset:
        params["offset"] = str(offset)
    return params


class BaseResource:
    """Base class for resource namespaces sharing one ClientContext."""

    def __init__(self, context: ClientContext) -> None:
        self._context = context

    def _request(self, endpoint: str) -> Request:
        return Request(self._context, endpoint)

    @staticmethod
    def _fields(fields: str | None, default: str) -> dict[str, str]:
        return {"fields": fields or default}

    @staticmethod
    def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a 2xx body into ``model``; anything else raises OutsetaHTTPError."""
        if not _is_success(response):
            _handle_error_response(response)
        return _validate(response, model)

    @staticmethod
    def _parse_or_invalid(
        response: httpx.Response, model: type[ModelT] | None
    ) -> Any:
        """Map 400 to a ValidationError, 2xx to ``model`` (or None), raise otherwise."""
        if response.status_code == 400:
            return _validate(response, ValidationError)
        if not _is_success(response):
            _handle_error_response(response)
        if model is None:
            return None
        return _validate(response, model)

    @staticmethod
    def _expect_ok(response: httpx.Response) -> None:
        if not _is_success(response):
            _handle_error_response(response)


__all__ = ["BaseResource"]
