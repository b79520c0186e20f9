"""Pydantic models for the wallet tracker HTTP API."""

from typing import Any, Optional, List
from pydantic import BaseModel


# -------- Movements --------

class MovementRequest(BaseModel):
    address: str
    # Left untyped: the validator rejects booleans, floats and strings
    # as INVALID_AMOUNT instead of pydantic coercing them to ints.
    amount: Any


class MovementResponse(BaseModel):
    success: bool
    balance: int
    error_code: Optional[str] = None
    error_message: Optional[str] = None


# -------- Queries --------

class BalanceResponse(BaseModel):
    balance: int


class EntryResponse(BaseModel):
    entry_id: str
    kind: str
    address: str
    amount: int


class HistoryResponse(BaseModel):
    lines: List[str]
    entries: List[EntryResponse]
