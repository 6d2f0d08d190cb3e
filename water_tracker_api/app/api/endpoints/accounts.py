"""
Account endpoints: sign up, log in and change the profile picture.

No token is issued on login; clients re‑submit credentials when they
need to prove who they are.  The profile update is keyed only by the
user name in the path.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from water_tracker_api.app.api.deps import get_db
from water_tracker_api.app.core.db import Database
from water_tracker_api.app.core.errors import InvalidCredentialsError, NotFoundError
from water_tracker_api.app.schemas.account import AccountCreate, LoginRequest, ProfilePictureUpdate
from water_tracker_api.app.services.account_service import AccountService


router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(payload: AccountCreate, db: Database = Depends(get_db)) -> Dict[str, Any]:
    """Create an account and return its ID.

    A duplicate user name is reported as a 500 with the database
    message, like any other storage failure.
    """
    account_id = AccountService.create_account(db, payload)
    return {"message": "User created!", "id": account_id}


@router.post("/login")
def login(payload: LoginRequest, db: Database = Depends(get_db)):
    """Check credentials and return the account with its counters.

    Both an unknown user name and a wrong password yield 400.
    """
    try:
        account = AccountService.authenticate(db, payload.user_name, payload.password)
    except (NotFoundError, InvalidCredentialsError) as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.message})
    return {"message": "Login successful!", "user": account.model_dump(by_alias=True)}


@router.patch("/update-profile/{user_name}")
def update_profile(
    user_name: str,
    payload: ProfilePictureUpdate,
    db: Database = Depends(get_db),
) -> Dict[str, Any]:
    """Replace the profile picture URL of ``user_name``.

    The path segment arrives already percent‑decoded (``Jo%C3%A3o``
    becomes ``João``) and is not decoded again.
    """
    profile = AccountService.update_profile_picture(db, user_name, payload.profile_picture_url)
    return {"message": "Profile picture updated!", "user": profile.model_dump()}
