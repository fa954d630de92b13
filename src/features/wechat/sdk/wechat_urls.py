from urllib.parse import urlencode

from pydantic import SecretStr

from util.config import config


def _url(base_url: str, path: str, **query: str) -> str:
    return f"{base_url}{path}?{urlencode(query)}"


def _token(token: SecretStr) -> str:
    return token.get_secret_value()


def access_token_url(app_id: str, app_secret: SecretStr) -> str:
    return _url(
        config.api_base_url,
        "/cgi-bin/token",
        grant_type = "client_credential",
        appid = app_id,
        secret = app_secret.get_secret_value(),
    )


# === Media ===

def media_upload_url(token: SecretStr, media_type: str) -> str:
    return _url(config.file_api_base_url, "/cgi-bin/media/upload", access_token = _token(token), type = media_type)


def media_download_url(token: SecretStr, media_id: str) -> str:
    return _url(config.file_api_base_url, "/cgi-bin/media/get", access_token = _token(token), media_id = media_id)


def media_upload_news_url(token: SecretStr) -> str:
    return _url(config.api_base_url, "/cgi-bin/media/uploadnews", access_token = _token(token))


def media_upload_video_url(token: SecretStr) -> str:
    return _url(config.file_api_base_url, "/cgi-bin/media/uploadvideo", access_token = _token(token))


# === Merchant orders ===

def merchant_order_get_by_id_url(token: SecretStr) -> str:
    return _url(config.api_base_url, "/merchant/order/getbyid", access_token = _token(token))


def merchant_order_get_by_filter_url(token: SecretStr) -> str:
    return _url(config.api_base_url, "/merchant/order/getbyfilter", access_token = _token(token))


def merchant_order_set_delivery_url(token: SecretStr) -> str:
    return _url(config.api_base_url, "/merchant/order/setdelivery", access_token = _token(token))


def merchant_order_close_url(token: SecretStr) -> str:
    return _url(config.api_base_url, "/merchant/order/close", access_token = _token(token))
