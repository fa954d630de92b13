from pydantic import BaseModel, ConfigDict

from features.merchant.model.order import Order


class OrderResult(BaseModel):
    model_config = ConfigDict(extra = "ignore")

    order: Order


class OrderListResult(BaseModel):
    model_config = ConfigDict(extra = "ignore")

    order_list: list[Order] | None = None
