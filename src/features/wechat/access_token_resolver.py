import threading
import time

from pydantic import SecretStr

from di.di import DI
from features.wechat.model.access_token import AccessToken
from features.wechat.sdk.wechat_urls import access_token_url
from util import log
from util.config import config
from util.error_codes import MISSING_APP_CREDENTIALS
from util.errors import ConfigurationError
from util.functions import mask_secret


class AccessTokenResolver:

    __di: DI
    __token: SecretStr | None
    __expires_at: float
    __lock: threading.Lock

    def __init__(self, di: DI):
        self.__di = di
        self.__token = None
        self.__expires_at = 0.0
        self.__lock = threading.Lock()

    def require_access_token(self) -> SecretStr:
        with self.__lock:
            if self.__token is not None and time.monotonic() < self.__expires_at:
                return self.__token
            log.t("Access token is missing or expired, fetching a new one")
            token = self.__fetch_access_token()
            # refresh a bit early so that in-flight calls don't carry an expired token
            lifetime_s = max(token.expires_in - config.access_token_expiry_margin_s, 0)
            self.__token = token.access_token
            self.__expires_at = time.monotonic() + lifetime_s
            log.d(f"Fetched access token {mask_secret(self.__token)}, valid for {lifetime_s}s")
            return self.__token

    def invalidate(self):
        with self.__lock:
            log.t("Invalidating the cached access token")
            self.__token = None
            self.__expires_at = 0.0

    def __fetch_access_token(self) -> AccessToken:
        if not config.app_id or not config.app_secret.get_secret_value():
            raise ConfigurationError(log.e("App ID and app secret must be configured"), MISSING_APP_CREDENTIALS)
        wechat_api = self.__di.wechat_api
        data = wechat_api.get_json(access_token_url(config.app_id, config.app_secret))
        return wechat_api.decode(data, AccessToken)
