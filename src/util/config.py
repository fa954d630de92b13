# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    web_timeout_s: int
    api_base_url: str
    file_api_base_url: str
    app_id: str
    access_token_expiry_margin_s: int
    buffer_pool_size: int
    download_chunk_size: int
    version: str

    app_secret: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.app_secret,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_web_timeout_s: int = 10,
        def_api_base_url: str = "https://api.weixin.qq.com",
        def_file_api_base_url: str = "https://file.api.weixin.qq.com",
        def_app_id: str = "",
        def_access_token_expiry_margin_s: int = 60,
        def_buffer_pool_size: int = 16,
        def_download_chunk_size: int = 32 * 1024,
        def_version: str = "dev",

        def_app_secret: SecretStr = SecretStr(""),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.api_base_url = self.__env("WECHAT_API_BASE_URL", lambda: def_api_base_url).rstrip("/")
        self.file_api_base_url = self.__env("WECHAT_FILE_API_BASE_URL", lambda: def_file_api_base_url).rstrip("/")
        self.app_id = self.__env("WECHAT_APP_ID", lambda: def_app_id)
        self.access_token_expiry_margin_s = int(self.__env("ACCESS_TOKEN_EXPIRY_MARGIN_S", lambda: str(def_access_token_expiry_margin_s)))
        self.buffer_pool_size = int(self.__env("BUFFER_POOL_SIZE", lambda: str(def_buffer_pool_size)))
        self.download_chunk_size = int(self.__env("DOWNLOAD_CHUNK_SIZE", lambda: str(def_download_chunk_size)))
        self.version = self.__env("VERSION", lambda: def_version)

        self.app_secret = self.__senv("WECHAT_APP_SECRET", lambda: def_app_secret)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
