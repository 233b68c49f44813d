from dataclasses import dataclass
from enum import Enum
from typing import cast

from features.flows.flow_engine_api import FlowEngineAPI
from features.observability.observability_sink import ObservabilitySink
from features.whatsapp.model.update import Update
from features.whatsapp.preview.error_details import describe_error, parse_error_details, to_breadcrumb
from features.whatsapp.preview.preview_session import preview_session_id
from features.whatsapp.preview.webhook_classifier import WebhookClassifier
from features.whatsapp.preview.webhook_error_policy import WebhookErrorPolicy
from features.whatsapp.webhook_errors import WhatsAppError
from util import log
from util.config import config
from util.error_codes import MISSING_PREVIEW_PHONE_NUMBER_ID
from util.errors import ConfigurationError
from util.functions import silent

NO_CONTENT_MESSAGE = "No message content found"
RECEIVED_MESSAGE = "Message received"


def assert_preview_configured() -> None:
    if not config.whatsapp_preview_phone_number_id:
        raise ConfigurationError(
            "WHATSAPP_PREVIEW_FROM_PHONE_NUMBER_ID is not defined",
            MISSING_PREVIEW_PHONE_NUMBER_ID,
        )


class PreviewWebhookResponder:
    """
    Handles webhook deliveries for the WhatsApp preview channel.

    The pipeline runs the error policy, then the classifier, then resumes the
    preview flow. Every failure is captured into an `Outcome` and reported to
    the observability sink; the acknowledgment returned to WhatsApp is always a
    success so that the provider never retries a delivery (and never resumes a
    flow twice).
    """

    class Result(Enum):
        resumed = "resumed"
        no_content = "no_content"
        classified_error = "classified_error"
        unclassified_error = "unclassified_error"

    @dataclass(frozen = True)
    class Outcome:
        result: "PreviewWebhookResponder.Result"
        error: Exception | None = None

    __flow_engine_api: FlowEngineAPI
    __observability_sink: ObservabilitySink
    __classifier: WebhookClassifier
    __error_policy: WebhookErrorPolicy

    def __init__(
        self,
        flow_engine_api: FlowEngineAPI,
        observability_sink: ObservabilitySink,
        classifier: WebhookClassifier | None = None,
        error_policy: WebhookErrorPolicy | None = None,
    ):
        self.__flow_engine_api = flow_engine_api
        self.__observability_sink = observability_sink
        self.__classifier = classifier or WebhookClassifier()
        self.__error_policy = error_policy or WebhookErrorPolicy(flow_engine_api)

    def respond(self, update: Update) -> dict:
        if config.log_whatsapp_update:
            log.t(f"Received a WhatsApp preview update: `{update}`")
        outcome = self.process(update)
        self.__report(outcome)
        return self.acknowledge(outcome)

    def process(self, update: Update) -> Outcome:
        Result = PreviewWebhookResponder.Result
        Outcome = PreviewWebhookResponder.Outcome
        try:
            self.__error_policy.check_for_errors(update)
            extracted = self.__classifier.extract(update)
            if not extracted.is_actionable or not extracted.message:
                log.d("No actionable message in the preview update")
                return Outcome(Result.no_content)

            session_id = preview_session_id(extracted.message.from_)
            self.__flow_engine_api.resume_flow(
                message = extracted.message,
                session_id = session_id,
                contact_name = extracted.contact_name,
                contact_phone_number = extracted.contact_phone_number,
            )
            log.i(f"Resumed preview flow for session '{session_id}'")
            return Outcome(Result.resumed)
        except WhatsAppError as e:
            return Outcome(Result.classified_error, e)
        except Exception as e:
            return Outcome(Result.unclassified_error, e)

    @staticmethod
    def acknowledge(outcome: Outcome) -> dict:
        if outcome.result == PreviewWebhookResponder.Result.no_content:
            return {"message": NO_CONTENT_MESSAGE}
        return {"message": RECEIVED_MESSAGE}

    @silent
    def __report(self, outcome: Outcome):
        match outcome.result:
            case PreviewWebhookResponder.Result.resumed | PreviewWebhookResponder.Result.no_content:
                return
            case PreviewWebhookResponder.Result.classified_error:
                error = cast(WhatsAppError, outcome.error)
                self.__observability_sink.report_classified(error.kind.value, error.details)
            case PreviewWebhookResponder.Result.unclassified_error:
                error = cast(Exception, outcome.error)
                log.d("Reporting an unclassified preview webhook failure")
                details = parse_error_details(describe_error(error))
                self.__observability_sink.report_unclassified(error, to_breadcrumb(details))
