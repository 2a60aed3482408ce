"""OTP verification."""

from sendly.verify.schemas import (
    CheckVerificationRequest,
    CheckVerificationResponse,
    CreateSessionRequest,
    Pagination,
    SendVerificationRequest,
    SendVerificationResponse,
    ValidateSessionRequest,
    ValidateSessionResponse,
    Verification,
    VerificationListOptions,
    VerificationListResponse,
    VerifySession,
)
from sendly.verify.service import HostedSessionManager, VerificationManager

__all__ = [
    "CheckVerificationRequest",
    "CheckVerificationResponse",
    "CreateSessionRequest",
    "HostedSessionManager",
    "Pagination",
    "SendVerificationRequest",
    "SendVerificationResponse",
    "ValidateSessionRequest",
    "ValidateSessionResponse",
    "Verification",
    "VerificationListOptions",
    "VerificationListResponse",
    "VerificationManager",
    "VerifySession",
]
