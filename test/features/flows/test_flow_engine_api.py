import unittest
from unittest.mock import MagicMock, patch

import requests_mock
from pydantic import SecretStr
from requests import HTTPError

from features.flows.flow_engine_api import FlowEngineAPI
from features.whatsapp.model.message import Message

BASE_URL = "https://flows.example.com/api"


class FlowEngineAPITest(unittest.TestCase):

    message: Message

    def setUp(self):
        patcher_config = patch("features.flows.flow_engine_api.config")
        self.addCleanup(patcher_config.stop)
        mock_config: MagicMock = patcher_config.start()
        mock_config.flow_engine_url = BASE_URL
        mock_config.flow_engine_api_key = SecretStr("engine-key")
        mock_config.web_timeout_s = 5

        self.message = Message.model_validate({
            "from": "16505551234",
            "id": "wamid.message",
            "timestamp": "1749416383",
            "type": "text",
            "text": {"body": "Hello"},
        })

    @requests_mock.Mocker()
    def test_resume_flow(self, m):
        url = f"{BASE_URL}/v1/sessions/wa-preview-16505551234/resume"
        m.post(url, status_code = 204)

        FlowEngineAPI().resume_flow(
            message = self.message,
            session_id = "wa-preview-16505551234",
            contact_name = "Sheena Nelson",
            contact_phone_number = "16505551234",
        )

        self.assertEqual(m.call_count, 1)
        request = m.request_history[0]
        self.assertEqual(request.headers["Authorization"], "Bearer engine-key")
        self.assertEqual(
            request.json(),
            {
                "receivedMessage": {
                    "from": "16505551234",
                    "id": "wamid.message",
                    "timestamp": "1749416383",
                    "type": "text",
                    "text": {"body": "Hello"},
                },
                "sessionId": "wa-preview-16505551234",
                "contact": {"name": "Sheena Nelson", "phoneNumber": "16505551234"},
            },
        )

    @requests_mock.Mocker()
    def test_resume_flow_failure_raises(self, m):
        m.post(f"{BASE_URL}/v1/sessions/wa-preview-1/resume", status_code = 500, text = '{"message": "Flow crashed"}')

        with self.assertRaises(HTTPError) as context:
            FlowEngineAPI().resume_flow(self.message, "wa-preview-1", "", "1")

        self.assertEqual(context.exception.response.text, '{"message": "Flow crashed"}')
        self.assertEqual(m.call_count, 1)

    @requests_mock.Mocker()
    def test_delete_session(self, m):
        m.delete(f"{BASE_URL}/v1/sessions/wa-preview-16505551234", status_code = 200, json = {})

        FlowEngineAPI().delete_session("wa-preview-16505551234")

        self.assertEqual(m.call_count, 1)
        self.assertEqual(m.request_history[0].headers["Authorization"], "Bearer engine-key")

    @requests_mock.Mocker()
    def test_delete_missing_session_is_not_an_error(self, m):
        m.delete(f"{BASE_URL}/v1/sessions/wa-preview-1", status_code = 404)

        FlowEngineAPI().delete_session("wa-preview-1")

        self.assertEqual(m.call_count, 1)

    @requests_mock.Mocker()
    def test_delete_session_failure_raises(self, m):
        m.delete(f"{BASE_URL}/v1/sessions/wa-preview-1", status_code = 503, text = "unavailable")

        with self.assertRaises(HTTPError):
            FlowEngineAPI().delete_session("wa-preview-1")

    @requests_mock.Mocker()
    def test_resume_flow_not_modified_raises(self, m):
        m.post(f"{BASE_URL}/v1/sessions/wa-preview-1/resume", status_code = 304)

        with self.assertRaises(HTTPError) as context:
            FlowEngineAPI().resume_flow(self.message, "wa-preview-1", "", "1")

        self.assertEqual(context.exception.response.status_code, 304)

    @requests_mock.Mocker()
    def test_delete_session_unfollowed_redirect_raises(self, m):
        m.delete(f"{BASE_URL}/v1/sessions/wa-preview-1", status_code = 307)

        with self.assertRaises(HTTPError) as context:
            FlowEngineAPI().delete_session("wa-preview-1")

        self.assertEqual(context.exception.response.status_code, 307)
