from di.di import DI
from features.merchant.model.order import Order, OrderStatus
from features.merchant.model.order_results import OrderListResult, OrderResult
from features.wechat.sdk.wechat_urls import (
    merchant_order_close_url,
    merchant_order_get_by_filter_url,
    merchant_order_get_by_id_url,
    merchant_order_set_delivery_url,
)
from util import log


class MerchantOrderSDK:

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def get_by_id(self, order_id: str) -> Order:
        log.t(f"Fetching order #{order_id}")
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        data = wechat_api.post_json(merchant_order_get_by_id_url(token), {"order_id": order_id})
        return wechat_api.decode(data, OrderResult).order

    def get_by_filter(
        self,
        status: OrderStatus | int = OrderStatus.all,
        begin_time: int = 0,
        end_time: int = 0,
    ) -> list[Order]:
        """
        Fetches orders by status and creation time (unix seconds).

        Parameters:
        status (OrderStatus | int): Order status, 0 matches all statuses.
        begin_time (int): Earliest creation time, 0 disables the bound.
        end_time (int): Latest creation time, 0 disables the bound.
        """
        log.t(f"Fetching orders by filter: status={int(status)}, begin={begin_time}, end={end_time}")
        # zero values are left out, the platform reads a missing field as "no filter"
        payload = {}
        if status:
            payload["status"] = int(status)
        if begin_time:
            payload["begintime"] = begin_time
        if end_time:
            payload["endtime"] = end_time
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        data = wechat_api.post_json(merchant_order_get_by_filter_url(token), payload)
        orders = wechat_api.decode(data, OrderListResult).order_list or []
        log.t(f"Found {len(orders)} orders")
        return orders

    def set_delivery(self, order_id: str, delivery_company: str, delivery_track_no: str):
        """The delivery company is one of the platform's delivery company IDs."""
        log.t(f"Setting delivery info for order #{order_id}")
        payload = {
            "order_id": order_id,
            "delivery_company": delivery_company,
            "delivery_track_no": delivery_track_no,
        }
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        wechat_api.require_success(wechat_api.post_json(merchant_order_set_delivery_url(token), payload))

    def close(self, order_id: str):
        log.t(f"Closing order #{order_id}")
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        wechat_api.require_success(wechat_api.post_json(merchant_order_close_url(token), {"order_id": order_id}))
