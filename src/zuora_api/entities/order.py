"""Order entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class Order(Entity):
    """Orders, keyed by order number"""

    def get(self, order_number: str) -> Dict[str, Any]:
        return self.client.request(HttpMethod.GET, f"orders/{order_number}").to_object()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an order together with its subscription for an account"""
        return self.client.request(HttpMethod.POST, "orders", json=data).to_object()

    def delete(self, order_number: str) -> Dict[str, Any]:
        return self.client.request(HttpMethod.DELETE, f"orders/{order_number}").to_object()
