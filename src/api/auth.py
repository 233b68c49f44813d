import hashlib
import hmac

from fastapi import HTTPException
from starlette.status import HTTP_403_FORBIDDEN

from util import log
from util.config import config

SIGNATURE_PREFIX = "sha256="


def verify_whatsapp_webhook_challenge(mode: str | None, challenge: str | None, verify_token: str | None) -> str:
    if config.whatsapp_must_auth:
        expected_token = config.whatsapp_auth_key.get_secret_value()
        if mode != "subscribe" or not hmac.compare_digest(verify_token or "", expected_token):
            log.w("WhatsApp webhook verification failed", f"mode: {mode}")
            raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = "Webhook verification failed")
    elif mode != "subscribe":
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = "Webhook verification failed")
    return challenge or ""


def verify_whatsapp_signature(payload: bytes, signature_header: str | None) -> None:
    if not config.whatsapp_must_auth:
        return
    if not signature_header:
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = "Missing signature header")
    if not signature_header.startswith(SIGNATURE_PREFIX):
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = "Invalid signature format")

    expected_signature = hmac.new(
        config.whatsapp_app_secret.get_secret_value().encode(),
        payload,
        hashlib.sha256,
    ).hexdigest()
    if not hmac.compare_digest(signature_header[len(SIGNATURE_PREFIX):], expected_signature):
        log.w("WhatsApp webhook signature mismatch")
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = "Invalid signature")
