from pydantic import BaseModel, StrictInt

from webcheckout.models import OrderContext, OrderItem


class OrderItemRequest(BaseModel):
    name: str
    amount_minor_units: StrictInt | None = None
    currency_code: str | None = None


class CheckoutFormRequest(BaseModel):
    order_id: str
    amount_minor_units: StrictInt
    currency_code: str
    items: list[OrderItemRequest] = []

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "ORD-1",
                    "amount_minor_units": 2599,
                    "currency_code": "USD",
                    "items": [{"name": "Book"}],
                }
            ]
        }
    }

    def to_order_context(self) -> OrderContext:
        return OrderContext(
            order_id=self.order_id,
            amount_minor_units=self.amount_minor_units,
            currency_code=self.currency_code,
            items=tuple(
                OrderItem(
                    name=item.name,
                    amount_minor_units=item.amount_minor_units,
                    currency_code=item.currency_code,
                )
                for item in self.items
            ),
        )


class CheckoutFormResponse(BaseModel):
    action_url: str
    method: str
    fields: dict[str, str]


class CurrenciesResponse(BaseModel):
    currencies: list[str]
