"""
Rhythm90 Backend — Integration Webhooks
========================================

What:  POST /slack-hook, the inbound endpoint for the Slack app.
How:   The payload is logged for diagnostics and acknowledged. There is no
       signature verification and no command or event dispatch; any JSON
       body gets the same {"success": true}.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body

from rhythm90.schemas.board import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Integrations"])


@router.post(
    "/slack-hook",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    summary="Slack webhook receiver",
)
async def slack_hook(payload: Any = Body(default=None)) -> SuccessResponse:
    logger.info("Slack webhook received: %s", payload)
    return SuccessResponse()
