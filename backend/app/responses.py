"""
Storefront API — Decimal-Preserving JSON I/O
==============================================

What:  A request/route pair that parses JSON floats as Decimal, and a
       JSONResponse that writes Decimal values back as JSON numbers.
Why:   Prices are fixed-point. The stdlib json module reads every JSON float
       into a binary float, and Pydantic writes Decimal as a string, so a
       price like 12345678901234567.89 would come back with different digits
       or as text.
How:   DecimalJSONRoute wraps each incoming request in DecimalJSONRequest,
       whose json() uses parse_float=Decimal. Handlers return
       DecimalJSONResponse, which emits str(Decimal) unquoted.
Who:   Used by routes/products.py (the only router carrying prices).
"""

import json
from decimal import Decimal
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute


def encode_json(value: Any) -> str:
    """
    Serialize JSON-compatible data, writing Decimals digit for digit.

    Output matches Starlette's JSONResponse (compact separators, no ASCII
    escaping, NaN/Infinity rejected).
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Out of range decimal value is not JSON compliant: {value}")
        return str(value)
    if isinstance(value, dict):
        items = (f"{json.dumps(str(k), ensure_ascii=False)}:{encode_json(v)}" for k, v in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(encode_json(v) for v in value) + "]"
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


class DecimalJSONResponse(JSONResponse):
    """JSONResponse whose content may contain Decimal values."""

    def render(self, content: Any) -> bytes:
        return encode_json(content).encode("utf-8")


class DecimalJSONRequest(Request):
    """Request whose JSON body keeps fractional numbers as Decimal."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """
    APIRoute that hands its endpoint a DecimalJSONRequest.

    Usage:
        router = APIRouter(prefix="/api/products", route_class=DecimalJSONRoute)
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            return await original_route_handler(DecimalJSONRequest(request.scope, request.receive))

        return decimal_route_handler
