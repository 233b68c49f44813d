# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    DEV_WHATSAPP_AUTH_KEY = "it_is_really_whatsapp"  # needed for local dev mode

    log_level: str
    log_whatsapp_update: bool
    web_timeout_s: int
    version: str
    whatsapp_must_auth: bool
    whatsapp_preview_phone_number_id: str | None
    flow_engine_url: str

    whatsapp_auth_key: SecretStr
    whatsapp_app_secret: SecretStr
    flow_engine_api_key: SecretStr

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_whatsapp_update: bool = False,
        def_web_timeout_s: int = 10,
        def_version: str = "dev",
        def_whatsapp_must_auth: bool = False,
        def_whatsapp_preview_phone_number_id: str | None = None,
        def_flow_engine_url: str = "http://localhost:3000/api",

        def_whatsapp_auth_key: SecretStr = SecretStr(DEV_WHATSAPP_AUTH_KEY),
        def_whatsapp_app_secret: SecretStr = SecretStr("invalid"),
        def_flow_engine_api_key: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_whatsapp_update = self.__env("LOG_WA_UPDATE", lambda: str(def_log_whatsapp_update)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.version = self.__env("VERSION", lambda: def_version)
        self.whatsapp_must_auth = self.__env("WHATSAPP_AUTH_ON", lambda: str(def_whatsapp_must_auth)).lower() == "true"
        self.whatsapp_preview_phone_number_id = self.__env("WHATSAPP_PREVIEW_FROM_PHONE_NUMBER_ID", lambda: def_whatsapp_preview_phone_number_id)
        self.flow_engine_url = self.__env("FLOW_ENGINE_URL", lambda: def_flow_engine_url).rstrip("/")

        self.whatsapp_auth_key = self.__senv("WHATSAPP_API_UPDATE_AUTH_TOKEN", lambda: def_whatsapp_auth_key)
        self.whatsapp_app_secret = self.__senv("WHATSAPP_APP_SECRET", lambda: def_whatsapp_app_secret)
        self.flow_engine_api_key = self.__senv("FLOW_ENGINE_API_KEY", lambda: def_flow_engine_api_key)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str | None]) -> str | None:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
