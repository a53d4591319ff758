"""
Pydantic models for wire messages.
Field names double as the JSON contract returned to consumers.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WireMessageCandidate(BaseModel):
    """A parsed wire message that has not been persisted yet."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    seq: int = Field(..., description="Caller-supplied sequence number, unique across records")
    sender_rtn: str = Field(..., min_length=9, max_length=9, description="Sender routing number")
    sender_an: str = Field(..., min_length=1, description="Sender account number")
    receiver_rtn: str = Field(..., min_length=9, max_length=9, description="Receiver routing number")
    receiver_an: str = Field(..., min_length=1, description="Receiver account number")
    amount: int = Field(..., ge=0, description="Transfer amount")
    raw_message: str = Field(
        ...,
        serialization_alias="message",
        description="Original message text, stored verbatim for audit"
    )


class WireMessageRecord(WireMessageCandidate):
    """A persisted wire message with store-assigned identity and timestamp."""
    id: int = Field(..., description="Store-generated identity")
    created_at: datetime = Field(..., description="Store-generated creation time (UTC)")


class LoginResponse(BaseModel):
    """Body returned by a successful login."""
    message: str = "Successfully logged in"


class Caller(BaseModel):
    """Identity extracted from a verified token."""
    username: str
    issuer: Optional[str] = None
    expires_at: Optional[datetime] = None
