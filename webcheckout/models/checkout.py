from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

FORM_METHOD = "POST"


@dataclass(frozen=True)
class OrderItem:
    name: str
    amount_minor_units: int | None = None
    currency_code: str | None = None


@dataclass(frozen=True)
class OrderContext:
    order_id: str
    amount_minor_units: int
    currency_code: str
    items: tuple[OrderItem, ...] = ()


@dataclass(frozen=True)
class MerchantConfig:
    business_id: str
    environment: str


@dataclass(frozen=True)
class CallbackUrls:
    return_url: str
    cancel_url: str
    notify_url: str
    base_submit_url: str


class UrlResolver(Protocol):
    def urls_for(self, order_id: str) -> CallbackUrls: ...


@dataclass(frozen=True)
class FormDescriptor:
    """Hidden fields and target of the form posted to the hosted checkout page."""

    action_url: str
    fields: Mapping[str, str] = field(hash=False)
    method: str = FORM_METHOD

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
