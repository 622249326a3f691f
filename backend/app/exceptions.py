"""
Storefront API — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the failure outcomes of the store.
Why:   Each failure maps to exactly one HTTP status; raising a typed exception
       lets global handlers (registered in main.py) format every error the
       same way instead of each route building its own error response.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by the store; caught by global handlers.
When:  During request processing, whenever an identity check fails.

Exception Hierarchy:
    StorefrontError (base)
    ├── NotFoundError              → 404 Not Found
    ├── ConflictError              → 409 Conflict
    └── ValidationError            → 400 Bad Request
        └── ReferenceMissingError  → 400 Bad Request (dangling product id)

Every failure here is client-triggered and deterministic; none is fatal to
the process and none is retried.
"""

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """
    Base exception for all Storefront application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional structured info about the failing request
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """
    Raised when client input cannot be accepted.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ReferenceMissingError(ValidationError):
    """
    Raised when an entity refers to another entity that does not exist.

    When:    POST /api/orders with a productId that is not in the store.
    HTTP:    400 Bad Request

    The reference is only checked at creation time. Deleting the product
    later leaves the order untouched.
    """

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        ctx["resource_id"] = resource_id
        super().__init__(
            message=f"{resource.capitalize()} {resource_id} does not exist.",
            field=field,
            context=ctx,
        )
        self.resource = resource
        self.resource_id = resource_id


class NotFoundError(StorefrontError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/products/{id} or GET /api/orders/{id}
             with an id that is not in the store.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with id {resource_id} was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(StorefrontError):
    """
    Raised when a create call reuses an identifier already in the store.

    When:    POST /api/products or POST /api/orders with a taken id.
    HTTP:    409 Conflict

    Identifiers are caller-assigned, so a collision is the caller's to fix.
    The existing entity is never modified.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} with id {resource_id} already exists."
        ctx = context or {}
        ctx["resource"] = resource
        ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
