"""
Rhythm90 Backend — Sign-in Routes
==================================

What:  Provider sign-in stubs (/auth/google, /auth/microsoft), the demo
       sign-in (/auth/demo) and the demo-mode check (/demo/check).
Why:   The frontend login page needs working endpoints before real OAuth
       lands. Each stub upserts a fixed user for its provider.
"""

import logging

from fastapi import APIRouter, Depends

from rhythm90.schemas.account import DemoCheckResponse, LoginResponse, ProviderLogin
from rhythm90.services.demo_service import demo_service, is_demo_mode
from rhythm90.services.user_service import user_service
from rhythm90.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.get("/demo/check", response_model=DemoCheckResponse, summary="Is demo mode on?")
async def demo_check() -> DemoCheckResponse:
    return DemoCheckResponse(isDemoMode=is_demo_mode())


@router.post(
    "/auth/demo",
    response_model=LoginResponse,
    summary="Demo sign-in",
    description="Signs in as the demo user and seeds sample plays and signals. 403 unless DEMO_MODE is on.",
)
async def demo_login(store: Store = Depends(get_store)) -> LoginResponse:
    user = await demo_service.login(store)
    return LoginResponse(user=user, demo=True)


@router.post(
    "/auth/google",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    summary="Google sign-in (stub)",
)
async def google_login(
    body: ProviderLogin,
    store: Store = Depends(get_store),
) -> LoginResponse:
    user = await user_service.provider_login(store, "google", body.email, body.name)
    return LoginResponse(user=user)


@router.post(
    "/auth/microsoft",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    summary="Microsoft sign-in (stub)",
)
async def microsoft_login(
    body: ProviderLogin,
    store: Store = Depends(get_store),
) -> LoginResponse:
    user = await user_service.provider_login(store, "microsoft", body.email, body.name)
    return LoginResponse(user=user)
