import requests
from requests import HTTPError, RequestException, Response

from features.whatsapp.model.message import Message
from util import log
from util.config import config

API_VERSION = "v1"


class FlowEngineAPI:
    """
    Thin client for the conversational flow engine that owns preview sessions.
    It resumes paused flows with new inbound messages and tears sessions down.
    """

    __sessions_url: str

    def __init__(self):
        self.__sessions_url = f"{config.flow_engine_url}/{API_VERSION}/sessions"

    def resume_flow(
        self,
        message: Message,
        session_id: str,
        contact_name: str,
        contact_phone_number: str,
    ) -> None:
        log.t(f"Resuming flow for session '{session_id}'")
        payload = {
            "receivedMessage": message.model_dump(mode = "json", by_alias = True, exclude_none = True),
            "sessionId": session_id,
            "contact": {
                "name": contact_name,
                "phoneNumber": contact_phone_number,
            },
        }
        response = requests.post(
            f"{self.__sessions_url}/{session_id}/resume",
            json = payload,
            headers = self.__headers(),
            timeout = config.web_timeout_s,
        )
        self.__raise_for_status(response)

    def delete_session(self, session_id: str) -> None:
        log.t(f"Deleting session '{session_id}'")
        response = requests.delete(
            f"{self.__sessions_url}/{session_id}",
            headers = self.__headers(),
            timeout = config.web_timeout_s,
        )
        if response is not None and response.status_code == 404:
            log.d(f"  Session '{session_id}' was already gone")
            return
        self.__raise_for_status(response)

    def __headers(self) -> dict:
        return {
            "Authorization": f"Bearer {config.flow_engine_api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

    def __raise_for_status(self, response: Response | None):
        if response is None:
            raise RequestException(log.e("No flow engine response received"))
        if response.status_code < 200 or response.status_code > 299:
            message = log.e(f"  Status is not '200': HTTP_{response.status_code}!", response.text)
            raise HTTPError(message, response = response)
