"""HTTP routes for the wallet tracker API."""

from fastapi import APIRouter, Depends, Request

from wallettracker.api.models import (
    MovementRequest,
    MovementResponse,
    BalanceResponse,
    EntryResponse,
    HistoryResponse,
)
from wallettracker.balance_engine import Ledger, ApplyResult
from wallettracker.history import render_history
from wallettracker.models import EntryKind


router = APIRouter()


def get_ledger(req: Request) -> Ledger:
    ledger = getattr(req.app.state, "ledger", None)
    if ledger is None:
        raise RuntimeError("Ledger not initialized")
    return ledger


def _movement_response(res: ApplyResult) -> MovementResponse:
    return MovementResponse(
        success=res.success,
        balance=res.balance,
        error_code=res.error.value if res.error else None,
        error_message=res.error_message,
    )


# ------- Balance -------

@router.get("/balance", response_model=BalanceResponse)
def get_balance(ledger: Ledger = Depends(get_ledger)) -> BalanceResponse:
    return BalanceResponse(balance=ledger.balance)


# ------- Movements -------

@router.post("/deposits", response_model=MovementResponse)
def deposit(payload: MovementRequest, ledger: Ledger = Depends(get_ledger)) -> MovementResponse:
    res = ledger.apply(EntryKind.DEPOSIT, payload.address, payload.amount)
    return _movement_response(res)


@router.post("/withdrawals", response_model=MovementResponse)
def withdraw(payload: MovementRequest, ledger: Ledger = Depends(get_ledger)) -> MovementResponse:
    res = ledger.apply(EntryKind.WITHDRAWAL, payload.address, payload.amount)
    return _movement_response(res)


# ------- History -------

@router.get("/history", response_model=HistoryResponse)
def get_history(ledger: Ledger = Depends(get_ledger)) -> HistoryResponse:
    entries = ledger.entries
    return HistoryResponse(
        lines=render_history(ledger),
        entries=[
            EntryResponse(
                entry_id=e.entry_id,
                kind=e.kind.value,
                address=e.address,
                amount=e.amount,
            )
            for e in entries
        ],
    )
