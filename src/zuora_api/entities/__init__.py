"""Entities module initialization"""

from typing import Dict, Type

from zuora_api.entities.base import Entity
from zuora_api.entities.account import Account
from zuora_api.entities.invoice import Invoice
from zuora_api.entities.order import Order
from zuora_api.entities.payment import Payment
from zuora_api.entities.payment_method import PaymentMethod
from zuora_api.entities.product import Product
from zuora_api.entities.subscription import Subscription

# Resource name -> entity class, looked up by ZuoraApi
RESOURCES: Dict[str, Type[Entity]] = {
    entity.__name__: entity
    for entity in (
        Account,
        Invoice,
        Order,
        Payment,
        PaymentMethod,
        Product,
        Subscription,
    )
}

__all__ = [
    "RESOURCES",
    "Entity",
    "Account",
    "Invoice",
    "Order",
    "Payment",
    "PaymentMethod",
    "Product",
    "Subscription",
]
