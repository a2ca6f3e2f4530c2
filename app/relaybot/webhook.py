# -*- coding: utf-8 -*-
"""
LINE webhook endpoint

Architecture:
    LINE Platform -> POST /callback -> signature check -> per-event tasks -> LINE Messaging API
"""
from contextlib import asynccontextmanager, suppress

from fastapi import APIRouter, FastAPI, HTTPException, Request
from loguru import logger
from pydantic import ValidationError

from line_api import verify_signature
from line_api.models import WebhookPayload
from relaybot.context import BotContext
from relaybot.task_manager import process_event_batch, wait_for_all_tasks

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/callback")
async def callback(request: Request):
    ctx: BotContext = request.app.state.bot_context

    body = await request.body()
    signature = request.headers.get("X-Line-Signature")
    if not verify_signature(ctx.channel_secret, body, signature):
        logger.warning("Rejected webhook request with invalid signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload = WebhookPayload.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid webhook payload")

    try:
        return await process_event_batch(ctx, payload.events)
    except Exception as err:
        logger.exception(f"Error processing events: {err}")
        raise HTTPException(status_code=500)


def create_app(bot_context: BotContext) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await wait_for_all_tasks()
        for component in (bot_context.translator, bot_context.messenger):
            if aclose := getattr(component, "aclose", None):
                with suppress(Exception):
                    await aclose()

    app = FastAPI(title="LINE Translator Bot", lifespan=lifespan)
    app.state.bot_context = bot_context
    app.include_router(router)
    return app
