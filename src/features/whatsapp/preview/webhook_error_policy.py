import json

from features.flows.flow_engine_api import FlowEngineAPI
from features.whatsapp.incoming_error_codes import KNOWN_ERROR_KINDS
from features.whatsapp.model.update import Update
from features.whatsapp.preview.preview_session import preview_session_id
from features.whatsapp.preview.webhook_classifier import authoritative_value
from features.whatsapp.webhook_errors import MalformedWebhookError, UnknownWebhookErrorCodeError, WhatsAppError
from util import log
from util.functions import first_or_none


class WebhookErrorPolicy:
    """
    Turns failed message statuses into errors. Only the first status and its first
    error are inspected. Unengaged users also lose their preview session.
    """

    __flow_engine_api: FlowEngineAPI

    def __init__(self, flow_engine_api: FlowEngineAPI):
        self.__flow_engine_api = flow_engine_api

    def check_for_errors(self, update: Update) -> None:
        value = authoritative_value(update)
        status = first_or_none(value.statuses) if value else None
        if not status or status.errors is None:
            return

        error = first_or_none(status.errors)
        if not error:
            raise MalformedWebhookError(status.model_dump_json(exclude_none = True))

        kind = KNOWN_ERROR_KINDS.get(error.code)
        if not kind:
            raw_errors = json.dumps([item.model_dump(mode = "json", exclude_none = True) for item in status.errors])
            raise UnknownWebhookErrorCodeError(raw_errors)

        log.d(f"Status for recipient '{status.recipient_id}' failed with code {error.code}")
        match kind:
            case WhatsAppError.Kind.unengaged_user:
                # must complete before the error propagates; a failed delete replaces the error
                self.__flow_engine_api.delete_session(preview_session_id(status.recipient_id))
                raise WhatsAppError(kind)
            case WhatsAppError.Kind.message_undeliverable:
                raise WhatsAppError(kind)
            case WhatsAppError.Kind.media_upload_error:
                raise WhatsAppError(kind, {"reason": error.error_data})
