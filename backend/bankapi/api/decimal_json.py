"""Decimal JSON — exact decimal numbers in request and response bodies.

Invariants:
    - JSON numbers with a fraction or exponent are parsed as Decimal, never float
    - Decimal values are written as bare JSON numbers with every digit kept
    - Non-finite decimals are rejected (JSON has no NaN/Infinity)

Design Decisions:
    - Route class + Request subclass: FastAPI reads bodies via request.json(),
      so overriding it is the supported hook for a custom decoder
    - Routes return DecimalJSONResponse themselves: FastAPI's response_model
      serialization renders Decimal as a JSON string
"""

import json
from decimal import Decimal
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute


class DecimalJSONRequest(Request):
    """Request whose JSON body keeps decimal fractions exact."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            self._json = json.loads(await self.body(), parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """APIRoute that hands endpoints a DecimalJSONRequest."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            request = DecimalJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return decimal_route_handler


class DecimalJSONResponse(JSONResponse):
    """JSONResponse that writes Decimal values as exact JSON numbers."""

    def render(self, content: Any) -> bytes:
        return encode_json(content).encode("utf-8")


def encode_json(value: Any) -> str:
    """Compact JSON text; Decimals emitted verbatim as numbers."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Out of range decimal value: {value}")
        return str(value)
    if isinstance(value, dict):
        return "{" + ",".join(
            f"{json.dumps(str(key), ensure_ascii=False)}:{encode_json(item)}"
            for key, item in value.items()
        ) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(encode_json(item) for item in value) + "]"
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
