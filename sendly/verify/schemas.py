"""Verification Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SendVerificationRequest(BaseModel):
    """Request to send a one-time code."""

    to: str = Field(..., description="Destination phone number (E.164)")
    template_id: str | None = Field(None, description="Message template to use")
    profile_id: str | None = Field(None, description="Verify profile to use")
    app_name: str | None = Field(None, description="App name shown in the message")
    timeout_secs: int | None = Field(None, description="Code lifetime override in seconds")
    code_length: int | None = Field(None, description="Code length override")


class SendVerificationResponse(BaseModel):
    """Response to sending or resending a code.

    ``sandbox_code`` is only populated in sandbox mode.
    """

    id: str = Field(..., description="Verification ID")
    status: str = Field("", description="Verification status")
    phone: str = Field("", description="Destination phone number")
    expires_at: datetime | None = Field(None, description="When the code expires")
    sandbox: bool = Field(False, description="Whether the request ran in sandbox mode")
    sandbox_code: str | None = Field(None, description="The code itself (sandbox only)")
    message: str | None = Field(None, description="Server message")

    model_config = {"frozen": True}


class CheckVerificationRequest(BaseModel):
    """Candidate code submitted for a verification."""

    code: str = Field(..., description="Code entered by the user")


class CheckVerificationResponse(BaseModel):
    """Result of checking a code."""

    id: str = Field(..., description="Verification ID")
    status: str = Field("", description="Verification status after the check")
    phone: str = Field("", description="Destination phone number")
    verified_at: datetime | None = Field(None, description="When verification succeeded")
    remaining_attempts: int | None = Field(
        None, description="Attempts left; absent once verified or exhausted"
    )

    model_config = {"frozen": True}


class Verification(BaseModel):
    """Verification record."""

    id: str = Field(..., description="Verification ID")
    status: str = Field("", description="Verification status")
    phone: str = Field("", description="Destination phone number")
    delivery_status: str = Field("", description="Message delivery status")
    attempts: int = Field(0, description="Check attempts made")
    max_attempts: int = Field(0, description="Check attempts allowed")
    expires_at: datetime | None = Field(None, description="When the code expires")
    verified_at: datetime | None = Field(None, description="When verification succeeded")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    sandbox: bool = Field(False, description="Whether the verification is sandboxed")
    sandbox_code: str | None = Field(None, description="The code itself (sandbox only)")
    app_name: str | None = Field(None, description="App name shown in the message")
    template_id: str | None = Field(None, description="Message template used")
    profile_id: str | None = Field(None, description="Verify profile used")

    model_config = {"frozen": True}


class VerificationListOptions(BaseModel):
    """Filters for listing verifications; zero/empty values are not sent."""

    limit: int = Field(0, description="Maximum results; omitted unless positive")
    status: str = Field("", description="Only verifications in this status")


class Pagination(BaseModel):
    limit: int = 0
    has_more: bool = False

    model_config = {"frozen": True}


class VerificationListResponse(BaseModel):
    """Page of verifications."""

    verifications: list[Verification] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    model_config = {"frozen": True}


class CreateSessionRequest(BaseModel):
    """Request to start a hosted verification flow."""

    success_url: str = Field(..., description="Where the user is sent after verifying")
    cancel_url: str | None = Field(None, description="Where the user is sent on cancel")
    brand_name: str | None = Field(None, description="Brand name on the hosted page")
    brand_color: str | None = Field(None, description="Brand color on the hosted page")
    metadata: dict[str, Any] | None = Field(None, description="Caller-defined metadata")


class VerifySession(BaseModel):
    """Hosted verification session.

    ``phone``, ``verification_id`` and ``token`` are populated once the user
    completes the hosted flow.
    """

    id: str = Field(..., description="Session ID")
    url: str = Field(..., description="Hosted page to redirect the user to")
    status: str = Field("", description="Session status")
    success_url: str = Field("", description="Redirect target on success")
    cancel_url: str | None = Field(None, description="Redirect target on cancel")
    brand_name: str | None = Field(None, description="Brand name on the hosted page")
    brand_color: str | None = Field(None, description="Brand color on the hosted page")
    phone: str | None = Field(None, description="Verified phone number")
    verification_id: str | None = Field(None, description="Underlying verification ID")
    token: str | None = Field(None, description="Token to validate server-side")
    metadata: dict[str, Any] | None = Field(None, description="Caller-defined metadata")
    expires_at: datetime | None = Field(None, description="When the session expires")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    model_config = {"frozen": True}


class ValidateSessionRequest(BaseModel):
    token: str = Field(..., description="Token returned to the success URL")


class ValidateSessionResponse(BaseModel):
    """Result of exchanging a session token.

    Everything but ``valid`` is ``None`` for an invalid token.
    """

    valid: bool = Field(..., description="Whether the token is valid")
    session_id: str | None = Field(None, description="Session the token belongs to")
    phone: str | None = Field(None, description="Verified phone number")
    verified_at: datetime | None = Field(None, description="When verification succeeded")
    metadata: dict[str, Any] | None = Field(None, description="Session metadata")

    model_config = {"frozen": True}
