"""Mini README: FastAPI JSON service driving the SmartSpend ledger.

Structure:
    * create_application - application factory wiring routes to an injected
      ledger instance.

The service is a thin adapter: every route forwards to one ledger operation
and returns JSON. Ledger errors are translated to HTTP status codes here so
the ledger itself stays free of web concerns. Passing a ledger into the
factory keeps each application (and each test) isolated.
"""

from __future__ import annotations

from typing import Dict, NoReturn, Optional

from fastapi import FastAPI, Form, HTTPException, Query
from fastapi.responses import JSONResponse

from ..configuration import SmartSpendSettings, get_settings
from ..export import SnapshotExporter
from ..finance import InvalidInputError, Ledger, LedgerInactiveError, NotFoundError
from ..logging_utils import get_logger, set_root_level

LOGGER = get_logger(__name__)


def _raise_http(error: Exception) -> NoReturn:
    """Translate a ledger failure into the matching HTTP error."""

    if isinstance(error, InvalidInputError):
        raise HTTPException(status_code=400, detail=str(error)) from error
    if isinstance(error, NotFoundError):
        raise HTTPException(status_code=404, detail=str(error)) from error
    if isinstance(error, LedgerInactiveError):
        raise HTTPException(status_code=409, detail=str(error)) from error
    raise error


def create_application(
    ledger: Optional[Ledger] = None,
    settings: Optional[SmartSpendSettings] = None,
) -> FastAPI:
    """Create the FastAPI application bound to a single ledger."""

    app = FastAPI(title="SmartSpend", version="0.1.0")
    ledger = ledger if ledger is not None else Ledger()
    settings = settings or get_settings()
    set_root_level(settings.log_level)
    exporter = SnapshotExporter()
    ledger_errors = (InvalidInputError, NotFoundError, LedgerInactiveError)

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return the dashboard totals."""

        return JSONResponse(ledger.summary())

    @app.post("/initialize")
    async def initialize(allowance: Optional[str] = Form(None)) -> JSONResponse:
        """Start a fresh session with the submitted daily allowance."""

        try:
            ledger.initialize(allowance)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(ledger.summary())

    @app.post("/transactions")
    async def add_transaction(
        transaction_type: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        description: str = Form(""),
    ) -> JSONResponse:
        """Record an income or expense entry."""

        try:
            transaction = ledger.add_transaction(description, amount, transaction_type)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        payload = [transaction.as_dict() for transaction in ledger.list_transactions()]
        return JSONResponse({"transactions": payload})

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: str) -> JSONResponse:
        try:
            transaction = ledger.get_transaction(transaction_id)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(transaction.as_dict())

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        try:
            deleted = ledger.delete_transaction(transaction_id)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse({"deleted": deleted})

    @app.post("/transactions/clear")
    async def clear_transactions() -> JSONResponse:
        try:
            ledger.clear_transactions()
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(ledger.summary())

    @app.post("/savings")
    async def add_saving(
        amount: Optional[str] = Form(None),
        description: str = Form(""),
    ) -> JSONResponse:
        """Record a savings deposit."""

        try:
            record = ledger.add_saving(description, amount)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(record.as_dict(), status_code=201)

    @app.get("/savings")
    async def list_savings() -> JSONResponse:
        return JSONResponse({"savings": [record.as_dict() for record in ledger.list_savings()]})

    @app.delete("/savings/{saving_id}")
    async def delete_saving(saving_id: str) -> JSONResponse:
        try:
            deleted = ledger.delete_saving(saving_id)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse({"deleted": deleted})

    @app.post("/savings/clear")
    async def clear_savings() -> JSONResponse:
        try:
            ledger.clear_savings()
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(ledger.summary())

    @app.post("/reset")
    async def reset() -> JSONResponse:
        ledger.reset()
        return JSONResponse(ledger.summary())

    @app.get("/projection")
    async def projection(days_left: Optional[int] = Query(None)) -> JSONResponse:
        """Project savings over ``days_left`` (defaults to the configured horizon)."""

        horizon = settings.projection_days if days_left is None else days_left
        try:
            result = ledger.project(horizon)
        except ledger_errors as error:
            _raise_http(error)
        return JSONResponse(result.as_dict())

    @app.get("/export")
    async def download_export() -> JSONResponse:
        """Return the export document as a downloadable attachment."""

        filename = exporter.default_filename()
        headers: Dict[str, str] = {"Content-Disposition": f'attachment; filename="{filename}"'}
        LOGGER.debug("Serving export %s", filename)
        return JSONResponse(exporter.build_snapshot(ledger), headers=headers)

    @app.post("/export")
    async def write_export() -> JSONResponse:
        """Write the export document into the configured data directory."""

        path = exporter.export(ledger, settings.data_directory)
        return JSONResponse({"path": str(path)}, status_code=201)

    return app
