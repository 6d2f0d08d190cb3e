"""
Pydantic models for account data.

Defines schemas for signing up, logging in, changing the profile
picture and the account views returned by those operations.  The
password hash never appears in any response model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountCreate(BaseModel):
    """Payload for ``POST /signup``."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName", examples=["alice"])
    profile_picture_url: Optional[str] = Field(
        None, alias="profilePictureURL", examples=["https://example.com/alice.png"]
    )
    password: str = Field(..., examples=["strongpassword"])
    recovery_email: Optional[str] = Field(None, alias="recoveryEmail", examples=["alice@example.com"])


class LoginRequest(BaseModel):
    """Payload for ``POST /login``."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName", examples=["alice"])
    password: str = Field(..., examples=["strongpassword"])


class ProfilePictureUpdate(BaseModel):
    """Payload for ``PATCH /update-profile/{userName}``."""

    model_config = ConfigDict(populate_by_name=True)

    profile_picture_url: Optional[str] = Field(
        None, alias="profilePictureURL", examples=["https://example.com/new.png"]
    )


class AccountSummary(BaseModel):
    """Account as returned by a successful login.

    Serialised with camelCase keys (``userName``, ``dailyWater``, ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_name: str = Field(..., serialization_alias="userName")
    profile_picture_url: Optional[str] = Field(None, serialization_alias="profilePictureURL")
    daily_water: int = Field(..., serialization_alias="dailyWater")
    week_water: int = Field(..., serialization_alias="weekWater")
    total_water: int = Field(..., serialization_alias="totalWater")


class ProfileRead(BaseModel):
    """Identity and picture of an account after a profile update.

    Uses the raw column names, as the client expects for this endpoint.
    """

    id: int
    user_name: str
    profile_picture_url: Optional[str] = None
