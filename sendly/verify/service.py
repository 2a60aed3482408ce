"""OTP verification and hosted verification sessions."""

from __future__ import annotations

import logging
from typing import Any

from sendly.executor import RequestExecutor
from sendly.validation import require_value
from sendly.verify.schemas import (
    CheckVerificationRequest,
    CheckVerificationResponse,
    CreateSessionRequest,
    SendVerificationRequest,
    SendVerificationResponse,
    ValidateSessionRequest,
    ValidateSessionResponse,
    Verification,
    VerificationListOptions,
    VerificationListResponse,
    VerifySession,
)

logger = logging.getLogger(__name__)


class HostedSessionManager:
    """Browser-redirect verification flows."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def create(self, req: CreateSessionRequest) -> VerifySession:
        """Create a hosted session; redirect the user to ``session.url``."""
        require_value(req.success_url, "success_url")
        data = await self._executor.request(
            "POST", "/verify/sessions", req.model_dump(exclude_none=True)
        )
        session = VerifySession.model_validate(data)
        logger.info("Created verify session %s", session.id)
        return session

    async def validate(self, req: ValidateSessionRequest) -> ValidateSessionResponse:
        """Exchange a session token for the verified phone number."""
        require_value(req.token, "token")
        data = await self._executor.request(
            "POST", "/verify/sessions/validate", req.model_dump()
        )
        result = ValidateSessionResponse.model_validate(data)
        if not result.valid:
            return ValidateSessionResponse(valid=False)
        return result


class VerificationManager:
    """OTP verification lifecycle."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self.sessions = HostedSessionManager(executor)

    async def send(self, req: SendVerificationRequest) -> SendVerificationResponse:
        """
        Send a verification code.

        Returns:
            Send status. In sandbox mode ``sandbox_code`` holds the code.
        """
        data = await self._executor.request("POST", "/verify", req.model_dump(exclude_none=True))
        result = SendVerificationResponse.model_validate(data)
        logger.info("Sent verification %s (sandbox=%s)", result.id, result.sandbox)
        return result

    async def resend(self, verification_id: str) -> SendVerificationResponse:
        data = await self._executor.request("POST", f"/verify/{verification_id}/resend")
        return SendVerificationResponse.model_validate(data)

    async def check(
        self, verification_id: str, req: CheckVerificationRequest
    ) -> CheckVerificationResponse:
        """Submit a candidate code."""
        data = await self._executor.request(
            "POST", f"/verify/{verification_id}/check", req.model_dump()
        )
        result = CheckVerificationResponse.model_validate(data)
        logger.info("Checked verification %s: %s", result.id, result.status)
        return result

    async def get(self, verification_id: str) -> Verification:
        data = await self._executor.request("GET", f"/verify/{verification_id}")
        return Verification.model_validate(data)

    async def list(
        self, options: VerificationListOptions | None = None
    ) -> VerificationListResponse:
        """List recent verifications.

        Only non-zero ``limit`` and non-empty ``status`` become query parameters.
        """
        params: dict[str, Any] = {}
        if options is not None:
            if options.limit > 0:
                params["limit"] = options.limit
            if options.status:
                params["status"] = options.status

        data = await self._executor.request("GET", "/verify", params=params or None)
        return VerificationListResponse.model_validate(data)
