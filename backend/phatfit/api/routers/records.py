# phatfit/api/routers/records.py
from fastapi import APIRouter, Depends, status
from phatfit.api.deps import get_current_user, get_store
from phatfit.models.user import User
from phatfit.schemas.record import Record
from phatfit.services.credential_store import UserStore

router = APIRouter(prefix="/records", tags=["records"])

@router.get("", response_model=list[Record], response_model_exclude_none=True)
async def list_records(user: User = Depends(get_current_user)):
    """
    Get the authenticated user's full record history.

    Records are returned in the order they were appended, which is not
    necessarily sorted by their ``date``.
    """
    return user.records or []

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=list[Record],
    response_model_exclude_none=True,
)
async def append_record(
    body: Record,
    user: User = Depends(get_current_user),
    store: UserStore = Depends(get_store),
):
    """
    Append a record to the authenticated user's history.

    Any subset of the record fields may be sent. Existing records are never
    modified; the response is the full updated history.

    Raises:
        ValidationError (400): If a field has the wrong type
        StoreError (400): If the record could not be saved
    """
    return await store.append_record(str(user.id), body.to_document())
