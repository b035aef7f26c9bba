"""FastAPI handlers exposing the client store to UI code."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from src.models.account import Account
from src.models.base import CamelModel
from src.models.email_status import EmailReceiverStatus, VerificationCode
from src.stores import AppStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")


def get_store(request: Request) -> AppStore:
    """Dependency returning the store attached to the app."""
    return request.app.state.store


# Pydantic models for API
class StoreStateResponse(CamelModel):
    accounts: List[Account]
    selected_account: Optional[Account] = None
    is_loading_accounts: bool
    account_error: Optional[str] = None
    email_status: EmailReceiverStatus
    verification_codes: List[VerificationCode] = []


class ExpiryResponse(CamelModel):
    account_id: str
    last_login_time: Optional[str] = None
    days_until_expiry: Optional[int] = None


class SelectAccountRequest(CamelModel):
    id: Optional[str] = None


class EmailConnectionRequest(BaseModel):
    email: str
    password: str
    server: str
    port: int = Field(default=995)


class EmailConnectionResponse(BaseModel):
    result: str


def _command_failed(e: Exception) -> HTTPException:
    return HTTPException(status_code=502, detail=str(e))


def _find_account(store: AppStore, account_id: str) -> Account:
    for account in store.registry.accounts:
        if account.id == account_id:
            return account
    raise HTTPException(status_code=404, detail="Account not found")


# Store state
@router.get("/state", response_model=StoreStateResponse)
async def get_state(store: AppStore = Depends(get_store)):
    """Current view state without contacting the backend."""
    return StoreStateResponse(**store.snapshot())


# Account endpoints
@router.get("/accounts", response_model=List[Account])
async def list_accounts(store: AppStore = Depends(get_store)):
    """Reload and return the account list."""
    try:
        return await store.registry.load_accounts()
    except Exception as e:
        raise _command_failed(e)


@router.post("/accounts", response_model=List[Account])
async def save_account(account: Account, store: AppStore = Depends(get_store)):
    """Create or update an account and return the refreshed list."""
    try:
        await store.registry.save_account(account)
    except Exception as e:
        raise _command_failed(e)
    return store.registry.accounts


@router.delete("/accounts/{account_id}", response_model=List[Account])
async def delete_account(account_id: str, store: AppStore = Depends(get_store)):
    """Delete an account and return the refreshed list."""
    try:
        await store.registry.delete_account(account_id)
    except Exception as e:
        raise _command_failed(e)
    return store.registry.accounts


@router.post("/accounts/{account_id}/login", response_model=List[Account])
async def record_login(account_id: str, store: AppStore = Depends(get_store)):
    """Stamp the login time for an account and return the refreshed list."""
    try:
        await store.registry.update_last_login(account_id)
    except Exception as e:
        raise _command_failed(e)
    return store.registry.accounts


@router.get("/accounts/{account_id}/expiry", response_model=ExpiryResponse)
async def get_account_expiry(account_id: str, store: AppStore = Depends(get_store)):
    """Days until the account's credentials expire, from the local list."""
    account = _find_account(store, account_id)
    return ExpiryResponse(
        account_id=account.id,
        last_login_time=account.last_login_time,
        days_until_expiry=store.registry.get_days_until_expiry(account),
    )


@router.put("/accounts/selected", response_model=Optional[Account])
async def select_account(selection: SelectAccountRequest, store: AppStore = Depends(get_store)):
    """Select an account from the local list, or clear the selection."""
    account = _find_account(store, selection.id) if selection.id else None
    store.registry.select_account(account)
    return account


# Email receiver endpoints
@router.get("/email/status", response_model=EmailReceiverStatus)
async def get_email_status(store: AppStore = Depends(get_store)):
    """Poll the receiver status."""
    try:
        return await store.tracker.get_email_status()
    except Exception as e:
        raise _command_failed(e)


@router.post("/email/test-connection", response_model=EmailConnectionResponse)
async def test_email_connection(request: EmailConnectionRequest, store: AppStore = Depends(get_store)):
    """Run a one-shot connectivity probe through the backend."""
    try:
        result = await store.tracker.test_email_connection(
            request.email, request.password, request.server, request.port
        )
    except Exception as e:
        raise _command_failed(e)
    return EmailConnectionResponse(result=result)


@router.post("/email/receiver/start", response_model=EmailReceiverStatus)
async def start_email_receiver(request: EmailConnectionRequest, store: AppStore = Depends(get_store)):
    """Start the background receiver."""
    try:
        return await store.tracker.start_email_receiver(
            request.email, request.password, request.server, request.port
        )
    except Exception as e:
        raise _command_failed(e)


@router.post("/email/receiver/stop", response_model=EmailReceiverStatus)
async def stop_email_receiver(store: AppStore = Depends(get_store)):
    """Stop the background receiver."""
    try:
        return await store.tracker.stop_email_receiver()
    except Exception as e:
        raise _command_failed(e)


@router.get("/email/codes", response_model=List[VerificationCode])
async def get_verification_codes(store: AppStore = Depends(get_store)):
    """Verification codes collected by the receiver."""
    try:
        return await store.tracker.get_verification_codes()
    except Exception as e:
        raise _command_failed(e)
