from enum import Enum
from typing import Any

from util.error_codes import (
    EMPTY_STATUS_ERRORS,
    MEDIA_UPLOAD_FAILED,
    MESSAGE_UNDELIVERABLE,
    UNENGAGED_USER,
    UNKNOWN_WEBHOOK_ERROR_CODE,
)
from util.errors import ExternalServiceError, InternalError


class WhatsAppError(ExternalServiceError):
    """A delivery failure that WhatsApp reported and that we know how to name."""

    class Kind(Enum):
        unengaged_user = "Could not send message to unengaged user"
        message_undeliverable = "Message undeliverable"
        media_upload_error = "Media upload error"

    kind: Kind
    details: dict[str, Any] | None

    def __init__(self, kind: Kind, details: dict[str, Any] | None = None):
        super().__init__(kind.value, _ERROR_CODES[kind], emoji = "📵", details = details)
        self.kind = kind


_ERROR_CODES = {
    WhatsAppError.Kind.unengaged_user: UNENGAGED_USER,
    WhatsAppError.Kind.message_undeliverable: MESSAGE_UNDELIVERABLE,
    WhatsAppError.Kind.media_upload_error: MEDIA_UPLOAD_FAILED,
}


class UnclassifiedWebhookError(InternalError):
    """A webhook we cannot interpret. `details` holds the raw payload fragment (JSON)."""

    details: str

    def __init__(self, message: str, error_code: int, details: str):
        super().__init__(message, error_code, details = details)


class MalformedWebhookError(UnclassifiedWebhookError):
    def __init__(self, raw_status: str):
        super().__init__("WA empty errors", EMPTY_STATUS_ERRORS, raw_status)


class UnknownWebhookErrorCodeError(UnclassifiedWebhookError):
    def __init__(self, raw_errors: str):
        super().__init__("WA unknown incoming errors", UNKNOWN_WEBHOOK_ERROR_CODE, raw_errors)
