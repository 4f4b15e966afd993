"""
Rhythm90 Backend — Password Reset Routes
=========================================

What:  POST /request-password-reset issues a reset link; POST /reset-password
       redeems it with a new password.
Who:   Called by the ForgotPassword and ResetPassword pages.
"""

from fastapi import APIRouter, Depends

from rhythm90.schemas.account import PasswordReset, PasswordResetRequest
from rhythm90.schemas.board import ErrorResponse, SuccessResponse
from rhythm90.services.password_service import password_reset_service
from rhythm90.store import Store, get_store

router = APIRouter(tags=["Password Reset"])


@router.post(
    "/request-password-reset",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={429: {"description": "Too many reset requests", "model": ErrorResponse}},
    summary="Request a password reset link",
    description="Answers identically whether or not the email has an account.",
)
async def request_password_reset(
    body: PasswordResetRequest,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    message = await password_reset_service.request_reset(store, body.email)
    return SuccessResponse(message=message)


@router.post(
    "/reset-password",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid or expired reset token", "model": ErrorResponse}},
    summary="Set a new password with a reset token",
)
async def reset_password(
    body: PasswordReset,
    store: Store = Depends(get_store),
) -> SuccessResponse:
    message = await password_reset_service.reset_password(store, body.token, body.password)
    return SuccessResponse(message=message)
