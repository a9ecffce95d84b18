"""Subscription entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class Subscription(Entity):
    """Subscriptions"""

    def all(self, account_key: str) -> Dict[str, Any]:
        """Retrieve the subscriptions of an account"""
        return self.client.request(
            HttpMethod.GET, f"subscriptions/accounts/{account_key}"
        ).to_object()

    def get(self, subscription_key: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.GET, f"subscriptions/{subscription_key}"
        ).to_object()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(HttpMethod.POST, "subscriptions", json=data).to_object()

    def update(self, subscription_key: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"subscriptions/{subscription_key}", json=data
        ).to_object()

    def renew(self, subscription_key: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"subscriptions/{subscription_key}/renew"
        ).to_object()

    def cancel(self, subscription_key: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"subscriptions/{subscription_key}/cancel"
        ).to_object()
