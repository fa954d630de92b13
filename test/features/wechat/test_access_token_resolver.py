import unittest
from unittest.mock import MagicMock, Mock, patch

from pydantic import SecretStr

from di.di import DI
from features.wechat.access_token_resolver import AccessTokenResolver
from features.wechat.sdk.wechat_api import WeChatAPI
from features.wechat.wechat_errors import ApiError
from util.error_codes import MISSING_APP_CREDENTIALS
from util.errors import ConfigurationError


class AccessTokenResolverTest(unittest.TestCase):

    mock_di: DI
    resolver: AccessTokenResolver

    def setUp(self):
        self.mock_di = Mock(spec = DI)
        # noinspection PyPropertyAccess
        self.mock_di.wechat_api = WeChatAPI()
        self.resolver = AccessTokenResolver(self.mock_di)

        self.config_patcher = patch("features.wechat.access_token_resolver.config")
        self.mock_config = self.config_patcher.start()
        self.mock_config.app_id = "wx123"
        self.mock_config.app_secret = SecretStr("app_secret")
        self.mock_config.access_token_expiry_margin_s = 60

    def tearDown(self):
        self.config_patcher.stop()

    @staticmethod
    def token_response(token: str = "token_1", expires_in: int = 7200) -> MagicMock:
        response = MagicMock()
        response.status_code = 200
        response.json.return_value = {"access_token": token, "expires_in": expires_in}
        return response

    @patch("requests.get")
    def test_fetches_token(self, mock_get):
        mock_get.return_value = self.token_response()

        token = self.resolver.require_access_token()

        self.assertEqual(token.get_secret_value(), "token_1")
        url = mock_get.call_args.args[0]
        self.assertIn("/cgi-bin/token?", url)
        self.assertIn("appid=wx123", url)
        self.assertIn("secret=app_secret", url)
        self.assertIn("grant_type=client_credential", url)

    @patch("time.monotonic")
    @patch("requests.get")
    def test_caches_token_until_expiry_margin(self, mock_get, mock_monotonic):
        mock_get.side_effect = [self.token_response("token_1"), self.token_response("token_2")]
        mock_monotonic.return_value = 1000.0

        first = self.resolver.require_access_token()
        mock_monotonic.return_value = 1000.0 + 7200 - 61
        second = self.resolver.require_access_token()
        mock_monotonic.return_value = 1000.0 + 7200 - 60
        third = self.resolver.require_access_token()

        self.assertEqual(first.get_secret_value(), "token_1")
        self.assertEqual(second.get_secret_value(), "token_1")
        self.assertEqual(third.get_secret_value(), "token_2")
        self.assertEqual(mock_get.call_count, 2)

    @patch("requests.get")
    def test_invalidate_forces_refetch(self, mock_get):
        mock_get.side_effect = [self.token_response("token_1"), self.token_response("token_2")]

        self.resolver.require_access_token()
        self.resolver.invalidate()
        token = self.resolver.require_access_token()

        self.assertEqual(token.get_secret_value(), "token_2")
        self.assertEqual(mock_get.call_count, 2)

    @patch("requests.get")
    def test_missing_credentials(self, mock_get):
        self.mock_config.app_id = ""

        with self.assertRaises(ConfigurationError) as context:
            self.resolver.require_access_token()

        self.assertEqual(context.exception.error_code, MISSING_APP_CREDENTIALS)
        mock_get.assert_not_called()

    @patch("requests.get")
    def test_remote_error(self, mock_get):
        response = MagicMock()
        response.status_code = 200
        response.json.return_value = {"errcode": 40013, "errmsg": "invalid appid"}
        mock_get.return_value = response

        with self.assertRaises(ApiError) as context:
            self.resolver.require_access_token()

        self.assertEqual(context.exception.error_code, 40013)
        self.assertEqual(context.exception.error_message, "invalid appid")

    @patch("requests.get")
    def test_transport_error_propagates(self, mock_get):
        mock_get.side_effect = ConnectionError("network down")

        with self.assertRaises(ConnectionError):
            self.resolver.require_access_token()
