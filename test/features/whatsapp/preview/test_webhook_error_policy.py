import json
import unittest
from unittest.mock import Mock

from features.flows.flow_engine_api import FlowEngineAPI
from features.whatsapp.model.update import Update
from features.whatsapp.preview.webhook_error_policy import WebhookErrorPolicy
from features.whatsapp.webhook_errors import MalformedWebhookError, UnknownWebhookErrorCodeError, WhatsAppError


def _status_update(*statuses: dict) -> Update:
    return Update.model_validate({
        "entry": [{"changes": [{"value": {"statuses": list(statuses)}}]}],
    })


def _failed_status(*errors: dict, recipient_id: str = "16505551234") -> dict:
    return {"id": "wamid.status", "status": "failed", "timestamp": "1750263773", "recipient_id": recipient_id, "errors": list(errors)}


class WebhookErrorPolicyTest(unittest.TestCase):

    flow_engine_api: Mock
    policy: WebhookErrorPolicy

    def setUp(self):
        self.flow_engine_api = Mock(spec = FlowEngineAPI)
        self.policy = WebhookErrorPolicy(self.flow_engine_api)

    def test_no_entries(self):
        self.policy.check_for_errors(Update(entry = []))

        self.flow_engine_api.delete_session.assert_not_called()

    def test_no_statuses(self):
        update = Update.model_validate({"entry": [{"changes": [{"value": {"messages": []}}]}]})

        self.policy.check_for_errors(update)

        self.flow_engine_api.delete_session.assert_not_called()

    def test_status_without_errors(self):
        update = _status_update({"recipient_id": "16505551234", "status": "delivered"})

        self.policy.check_for_errors(update)

        self.flow_engine_api.delete_session.assert_not_called()

    def test_empty_errors_fail_loudly(self):
        update = _status_update(_failed_status())

        with self.assertRaises(MalformedWebhookError) as context:
            self.policy.check_for_errors(update)

        raw_status = json.loads(context.exception.details)
        self.assertEqual(raw_status["recipient_id"], "16505551234")
        self.assertEqual(raw_status["errors"], [])
        self.flow_engine_api.delete_session.assert_not_called()

    def test_unengaged_user_deletes_the_session_first(self):
        update = _status_update(_failed_status({"code": 131047, "title": "Re-engagement message"}))

        with self.assertRaises(WhatsAppError) as context:
            self.policy.check_for_errors(update)

        self.assertEqual(context.exception.kind, WhatsAppError.Kind.unengaged_user)
        self.assertIsNone(context.exception.details)
        self.flow_engine_api.delete_session.assert_called_once_with("wa-preview-16505551234")

    def test_unengaged_user_surfaces_a_failed_deletion(self):
        self.flow_engine_api.delete_session.side_effect = ConnectionError("store is down")
        update = _status_update(_failed_status({"code": 131047, "title": "Re-engagement message"}))

        with self.assertRaises(ConnectionError):
            self.policy.check_for_errors(update)

        self.flow_engine_api.delete_session.assert_called_once()

    def test_message_undeliverable(self):
        update = _status_update(_failed_status({"code": 131026, "title": "Message undeliverable"}))

        with self.assertRaises(WhatsAppError) as context:
            self.policy.check_for_errors(update)

        self.assertEqual(context.exception.kind, WhatsAppError.Kind.message_undeliverable)
        self.assertIsNone(context.exception.details)
        self.flow_engine_api.delete_session.assert_not_called()

    def test_media_upload_error_carries_the_error_data(self):
        error_data = {"details": "Unsupported media type"}
        update = _status_update(_failed_status({"code": 131053, "title": "Media upload error", "error_data": error_data}))

        with self.assertRaises(WhatsAppError) as context:
            self.policy.check_for_errors(update)

        self.assertEqual(context.exception.kind, WhatsAppError.Kind.media_upload_error)
        self.assertEqual(context.exception.details, {"reason": error_data})
        self.flow_engine_api.delete_session.assert_not_called()

    def test_unknown_code_is_unclassified(self):
        update = _status_update(_failed_status({"code": 130429, "title": "Rate limit hit"}))

        with self.assertRaises(UnknownWebhookErrorCodeError) as context:
            self.policy.check_for_errors(update)

        self.assertEqual(json.loads(context.exception.details), [{"code": 130429, "title": "Rate limit hit"}])
        self.flow_engine_api.delete_session.assert_not_called()

    def test_only_the_first_error_is_inspected(self):
        update = _status_update(_failed_status({"code": 131026}, {"code": 131047}))

        with self.assertRaises(WhatsAppError) as context:
            self.policy.check_for_errors(update)

        self.assertEqual(context.exception.kind, WhatsAppError.Kind.message_undeliverable)
        self.flow_engine_api.delete_session.assert_not_called()

    def test_only_the_first_status_is_inspected(self):
        update = _status_update(
            {"recipient_id": "1", "status": "delivered"},
            _failed_status({"code": 131047}),
        )

        self.policy.check_for_errors(update)

        self.flow_engine_api.delete_session.assert_not_called()
