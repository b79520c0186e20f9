"""FastAPI application for the wallet tracker HTTP API.

Serve the module-level app with the `server` extra installed:

    uvicorn wallettracker.api.app:app
"""

from typing import Optional

from fastapi import FastAPI

from wallettracker import __version__
from wallettracker.api.routes import router
from wallettracker.balance_engine import Ledger, new_session


def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    """Build an API app that owns one wallet session.

    Args:
        ledger: Ledger to serve. A fresh session is started if omitted.
    """
    app = FastAPI(
        title="Wallet Tracker API",
        version=__version__,
        description="HTTP API over a single in-memory wallet ledger",
    )

    # The app owns its ledger; routes reach it through app.state
    app.state.ledger = ledger if ledger is not None else new_session()

    app.include_router(router, prefix="/v1")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": app.version}

    return app


app = create_app()
