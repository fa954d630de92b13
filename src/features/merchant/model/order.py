from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class OrderStatus(IntEnum):
    """Order states accepted by the order filter, 'all' disables the filter."""
    all = 0
    pending_delivery = 2
    delivered = 3
    completed = 5
    under_dispute = 8


class Order(BaseModel):
    """A merchant store order, fields not listed here are kept as extras."""

    model_config = ConfigDict(extra = "allow")

    order_id: str
    order_status: int | None = None
    order_total_price: int | None = None
    order_create_time: int | None = None
    order_express_price: int | None = None
    buyer_openid: str | None = None
    buyer_nick: str | None = None
    receiver_name: str | None = None
    receiver_province: str | None = None
    receiver_city: str | None = None
    receiver_zone: str | None = None
    receiver_address: str | None = None
    receiver_mobile: str | None = None
    receiver_phone: str | None = None
    product_id: str | None = None
    product_name: str | None = None
    product_price: int | None = None
    product_sku: str | None = None
    product_count: int | None = None
    product_img: str | None = None
    delivery_id: str | None = None
    delivery_company: str | None = None
    trans_id: str | None = None
