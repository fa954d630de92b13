from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from features.media.sdk.media_sdk import MediaSDK
    from features.merchant.sdk.merchant_order_sdk import MerchantOrderSDK
    from features.wechat.access_token_resolver import AccessTokenResolver
    from features.wechat.sdk.wechat_api import WeChatAPI
    from util.buffer_pool import BufferPool


class DI:

    # Shared state
    _buffer_pool: "BufferPool | None"
    _access_token_resolver: "AccessTokenResolver | None"
    # SDKs
    _wechat_api: "WeChatAPI | None"
    _media_sdk: "MediaSDK | None"
    _merchant_order_sdk: "MerchantOrderSDK | None"

    def __init__(self):
        # Shared state
        self._buffer_pool = None
        self._access_token_resolver = None
        # SDKs
        self._wechat_api = None
        self._media_sdk = None
        self._merchant_order_sdk = None

    # === Shared state ===

    @property
    def buffer_pool(self) -> "BufferPool":
        if self._buffer_pool is None:
            from util.buffer_pool import BufferPool
            from util.config import config
            self._buffer_pool = BufferPool(config.buffer_pool_size)
        return self._buffer_pool

    @property
    def access_token_resolver(self) -> "AccessTokenResolver":
        if self._access_token_resolver is None:
            from features.wechat.access_token_resolver import AccessTokenResolver
            self._access_token_resolver = AccessTokenResolver(self)
        return self._access_token_resolver

    # === SDKs ===

    @property
    def wechat_api(self) -> "WeChatAPI":
        if self._wechat_api is None:
            from features.wechat.sdk.wechat_api import WeChatAPI
            self._wechat_api = WeChatAPI()
        return self._wechat_api

    @property
    def media_sdk(self) -> "MediaSDK":
        if self._media_sdk is None:
            from features.media.sdk.media_sdk import MediaSDK
            self._media_sdk = MediaSDK(self)
        return self._media_sdk

    @property
    def merchant_order_sdk(self) -> "MerchantOrderSDK":
        if self._merchant_order_sdk is None:
            from features.merchant.sdk.merchant_order_sdk import MerchantOrderSDK
            self._merchant_order_sdk = MerchantOrderSDK(self)
        return self._merchant_order_sdk
