import json
import traceback
from typing import Any

from pydantic import BaseModel

from features.whatsapp.webhook_errors import UnclassifiedWebhookError


class StructuredDetails(BaseModel):
    value: Any


class RawDetails(BaseModel):
    text: str | None = None


ErrorDetails = StructuredDetails | RawDetails


def parse_error_details(text: str | None) -> ErrorDetails:
    """Best-effort JSON parsing. Anything that is not valid JSON stays raw."""
    if not text:
        return RawDetails(text = text)
    try:
        return StructuredDetails(value = json.loads(text))
    except (ValueError, RecursionError):
        # nesting deeper than the interpreter stack is not worth structuring
        return RawDetails(text = text)


def describe_error(error: Exception) -> str | None:
    if isinstance(error, UnclassifiedWebhookError):
        return error.details
    # HTTP failures from collaborators carry the remote explanation in the body
    response = getattr(error, "response", None)
    if response is not None and getattr(response, "text", None):
        return response.text
    return "".join(traceback.format_exception(error)).strip()


def to_breadcrumb(details: ErrorDetails) -> dict[str, Any]:
    match details:
        case StructuredDetails(value = dict() as value):
            return value
        case StructuredDetails(value = value):
            return {"details": value}
        case RawDetails(text = text):
            return {"details": text}
