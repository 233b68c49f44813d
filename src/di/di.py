from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from features.flows.flow_engine_api import FlowEngineAPI
    from features.observability.observability_sink import ObservabilitySink
    from features.whatsapp.preview.preview_webhook_responder import PreviewWebhookResponder


class DI:

    # SDKs
    _flow_engine_api: "FlowEngineAPI | None"
    # Services
    _observability_sink: "ObservabilitySink | None"
    # Features
    _preview_webhook_responder: "PreviewWebhookResponder | None"

    def __init__(self):
        # SDKs
        self._flow_engine_api = None
        # Services
        self._observability_sink = None
        # Features
        self._preview_webhook_responder = None

    # === SDKs ===

    @property
    def flow_engine_api(self) -> "FlowEngineAPI":
        if self._flow_engine_api is None:
            from features.flows.flow_engine_api import FlowEngineAPI
            self._flow_engine_api = FlowEngineAPI()
        return self._flow_engine_api

    # === Services ===

    @property
    def observability_sink(self) -> "ObservabilitySink":
        if self._observability_sink is None:
            from features.observability.observability_sink import ObservabilitySink
            self._observability_sink = ObservabilitySink()
        return self._observability_sink

    # === Features ===

    @property
    def preview_webhook_responder(self) -> "PreviewWebhookResponder":
        if self._preview_webhook_responder is None:
            from features.whatsapp.preview.preview_webhook_responder import PreviewWebhookResponder
            self._preview_webhook_responder = PreviewWebhookResponder(
                flow_engine_api = self.flow_engine_api,
                observability_sink = self.observability_sink,
            )
        return self._preview_webhook_responder
