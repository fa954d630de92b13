import json
from typing import Any, BinaryIO, TypeVar

import requests
from pydantic import BaseModel
from requests import RequestException, Response

from features.wechat.model.error_envelope import ErrorEnvelope
from features.wechat.wechat_errors import ApiError, UnexpectedStatusError
from util import log
from util.config import config
from util.functions import strip_query

M = TypeVar("M", bound = BaseModel)


class WeChatAPI:
    """https://developers.weixin.qq.com/doc/offiaccount/Getting_Started/Overview.html"""

    def get_json(self, url: str) -> dict:
        log.t(f"GET {strip_query(url)}")
        response = requests.get(url, timeout = config.web_timeout_s)
        self.__raise_for_status(response)
        return response.json()

    def get_stream(self, url: str) -> Response:
        """Returns an open streaming response; the caller must close it."""
        log.t(f"GET (stream) {strip_query(url)}")
        response = requests.get(url, stream = True, timeout = config.web_timeout_s)
        try:
            self.__raise_for_status(response)
        except UnexpectedStatusError:
            response.close()
            raise
        return response

    def post_json(self, url: str, payload: Any) -> dict:
        log.t(f"POST {strip_query(url)}")
        # the platform shows escaped unicode literally, so the body is sent as raw UTF-8
        body = json.dumps(payload, ensure_ascii = False).encode("utf-8")
        headers = {"Content-Type": "application/json; charset=utf-8"}
        response = requests.post(url, data = body, headers = headers, timeout = config.web_timeout_s)
        self.__raise_for_status(response)
        return response.json()

    def post_multipart(self, url: str, body: BinaryIO, content_type: str) -> dict:
        log.t(f"POST (multipart) {strip_query(url)}")
        headers = {"Content-Type": content_type}
        response = requests.post(url, data = body, headers = headers, timeout = config.web_timeout_s)
        self.__raise_for_status(response)
        return response.json()

    def require_success(self, data: dict) -> ErrorEnvelope:
        envelope = ErrorEnvelope.model_validate(data)
        if not envelope.is_success:
            log.w(f"Platform API error {envelope.errcode}: {envelope.errmsg}")
            raise ApiError(envelope.errcode, envelope.errmsg)
        return envelope

    def decode(self, data: dict, model: type[M]) -> M:
        self.require_success(data)
        return model.model_validate(data)

    def __raise_for_status(self, response: Response | None):
        if response is None:
            raise RequestException(log.e("No API response received"))
        if response.status_code != 200:
            log.e(f"  Status is not '200': HTTP_{response.status_code}!")
            raise UnexpectedStatusError(response.status_code, response.reason)
