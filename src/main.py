import multiprocessing
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY

from api.auth import verify_whatsapp_signature, verify_whatsapp_webhook_challenge
from di.di import DI
from features.whatsapp.model.update import Update
from features.whatsapp.preview.preview_webhook_responder import assert_preview_configured
from util import log
from util.config import config
from util.errors import ConfigurationError

WHATSAPP_PREVIEW_WEBHOOK_PATH = "/v1/whatsapp/preview/webhook"


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(owner: FastAPI):
    process_name = multiprocessing.current_process().name
    worker_type = "main" if process_name == "MainProcess" else "worker"
    worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
    log.i(f"Lifecycle: Starting up {worker_info}")
    if not config.whatsapp_preview_phone_number_id:
        log.w("Lifecycle: WHATSAPP_PREVIEW_FROM_PHONE_NUMBER_ID is not set, preview webhooks will be rejected")
    yield  # this holds the app alive until the server is shut down
    log.i(f"Lifecycle: Shutting down {worker_info}...")


app = FastAPI(
    docs_url = None,
    redoc_url = None,
    title = "WhatsApp Preview Webhook",
    description = "Receives WhatsApp webhooks for preview sessions and resumes their flows.",
    debug = config.log_level in ["local", "trace", "debug"],
    lifespan = lifespan,
)


def get_di() -> DI:
    return DI()


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": config.version}


@app.get(WHATSAPP_PREVIEW_WEBHOOK_PATH, response_class = PlainTextResponse)
def whatsapp_preview_webhook_subscription(
    mode: str | None = Query(default = None, alias = "hub.mode"),
    challenge: str | None = Query(default = None, alias = "hub.challenge"),
    verify_token: str | None = Query(default = None, alias = "hub.verify_token"),
) -> str:
    log.d(f"WhatsApp preview webhook subscription request, mode '{mode}'")
    return verify_whatsapp_webhook_challenge(mode, challenge, verify_token)


@app.post(WHATSAPP_PREVIEW_WEBHOOK_PATH)
async def whatsapp_preview_webhook(request: Request, di: DI = Depends(get_di)) -> dict:
    # configuration problems surface to the caller; nothing has been touched yet
    try:
        assert_preview_configured()
    except ConfigurationError as e:
        log.e("Preview webhook is not configured", e)
        raise HTTPException(status_code = e.http_status, detail = e.to_api_dict())

    body = await request.body()
    verify_whatsapp_signature(body, request.headers.get("x-hub-signature-256"))
    try:
        update = Update.model_validate_json(body)
    except ValidationError as e:
        log.w("Received an invalid WhatsApp preview update", str(e))
        raise HTTPException(status_code = HTTP_422_UNPROCESSABLE_ENTITY, detail = "Invalid WhatsApp webhook payload")

    # from here on, the response is always a success
    return await run_in_threadpool(di.preview_webhook_responder.respond, update)


def read_version_file(path: Path = Path("./.version")) -> str | None:
    if not path.exists():
        print("ERROR:    Version file not found, using dev version", file = sys.stderr)
        return None
    version_name = path.read_text().strip()
    if not version_name:
        print("ERROR:    Version file empty", file = sys.stderr)
        return None
    return version_name


if __name__ == "__main__":
    dev_mode = "--dev" in sys.argv
    if dev_mode:  # single reloading worker with verbose logs
        os.environ["LOG_LEVEL"] = "debug"
        config.log_level = "debug"
    print(f"INFO:     Launching the preview webhook in {'dev' if dev_mode else 'production'} mode...")
    if version_name := read_version_file():
        os.environ["VERSION"] = version_name
        config.version = version_name
        print("INFO:     Version file found", f"v{config.version}")
    uvicorn.run(
        "main:app",
        host = "0.0.0.0",
        port = 80,
        log_level = "debug" if config.log_level == "local" else config.log_level,
        workers = 1 if dev_mode else 2,
        reload = dev_mode,
    )
