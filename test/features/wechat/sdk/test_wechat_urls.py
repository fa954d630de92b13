import unittest
from urllib.parse import parse_qs, urlparse

from pydantic import SecretStr

from features.wechat.sdk import wechat_urls


class WeChatUrlsTest(unittest.TestCase):

    token: SecretStr

    def setUp(self):
        self.token = SecretStr("token/with+special")

    def assert_url(self, url: str, host: str, path: str, query: dict[str, str]):
        parsed = urlparse(url)
        self.assertEqual(f"{parsed.scheme}://{parsed.netloc}", host)
        self.assertEqual(parsed.path, path)
        self.assertEqual({key: values[0] for key, values in parse_qs(parsed.query).items()}, query)

    def test_access_token_url(self):
        url = wechat_urls.access_token_url("wx123", SecretStr("secret"))

        self.assert_url(url, "https://api.weixin.qq.com", "/cgi-bin/token", {
            "grant_type": "client_credential",
            "appid": "wx123",
            "secret": "secret",
        })

    def test_media_upload_url(self):
        url = wechat_urls.media_upload_url(self.token, "thumb")

        self.assert_url(url, "https://file.api.weixin.qq.com", "/cgi-bin/media/upload", {
            "access_token": "token/with+special",
            "type": "thumb",
        })

    def test_media_download_url(self):
        url = wechat_urls.media_download_url(self.token, "media-42")

        self.assert_url(url, "https://file.api.weixin.qq.com", "/cgi-bin/media/get", {
            "access_token": "token/with+special",
            "media_id": "media-42",
        })

    def test_media_upload_news_url(self):
        url = wechat_urls.media_upload_news_url(self.token)

        self.assert_url(url, "https://api.weixin.qq.com", "/cgi-bin/media/uploadnews", {
            "access_token": "token/with+special",
        })

    def test_media_upload_video_url(self):
        url = wechat_urls.media_upload_video_url(self.token)

        self.assert_url(url, "https://file.api.weixin.qq.com", "/cgi-bin/media/uploadvideo", {
            "access_token": "token/with+special",
        })

    def test_merchant_order_urls(self):
        expected_paths = {
            wechat_urls.merchant_order_get_by_id_url: "/merchant/order/getbyid",
            wechat_urls.merchant_order_get_by_filter_url: "/merchant/order/getbyfilter",
            wechat_urls.merchant_order_set_delivery_url: "/merchant/order/setdelivery",
            wechat_urls.merchant_order_close_url: "/merchant/order/close",
        }
        for builder, path in expected_paths.items():
            self.assert_url(builder(self.token), "https://api.weixin.qq.com", path, {
                "access_token": "token/with+special",
            })
