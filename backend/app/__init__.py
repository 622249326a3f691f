"""
Storefront API — Application Package Initializer
==================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the usual FastAPI layering, minus a database:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Store & Services (Logic)        │  ← Identity checks, forecasts
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclasses + Pydantic
    └─────────────────────────────────────┘

    Routes translate HTTP into store/service calls and back.
    The store owns every entity for the lifetime of the application instance.
"""

__version__ = "1.0.0"
