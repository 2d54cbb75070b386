"""Mini README: Interfaces (HTTP/CLI) driving the SmartSpend ledger.

Exports the FastAPI application factory. The Typer CLI in
``main_smartspend.py`` serves it with uvicorn.
"""

from .web_app import create_application

__all__ = ["create_application"]
