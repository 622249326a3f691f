# Routes package init
"""
Storefront API — API Routes Package
=====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - health.py:    GET  /                         (plain-text liveness)
                    GET  /health                   (health check)
                    GET  /info                     (app name and version)
    - weather.py:   GET  /weatherforecast          (five-day demo forecast)
    - products.py:  GET/POST        /api/products
                    GET/PUT/DELETE  /api/products/{id}
    - orders.py:    GET/POST        /api/orders
                    GET             /api/orders/{id}

Design Principle:
    Routes are THIN: parse the request, call the store or a service,
    shape the response. Failures are raised as app.exceptions types and
    formatted by the global handlers in main.py.

Path ids:
    Item routes use the "signed_int" convertor registered below. A segment
    that is not an integer does not match the route, so the router answers
    404 rather than a validation error. Unlike Starlette's built-in "int"
    convertor it also matches negative ids, which callers are free to assign.
"""

from starlette.convertors import Convertor, register_url_convertor


class SignedIntegerConvertor(Convertor):
    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


register_url_convertor("signed_int", SignedIntegerConvertor())
