"""Payment entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class Payment(Entity):
    """Payments, including unapply and refund actions"""

    def all(self) -> Dict[str, Any]:
        return self.client.request(HttpMethod.GET, "payments").to_object()

    def get(self, payment_id: str) -> Dict[str, Any]:
        return self.client.request(HttpMethod.GET, f"payments/{payment_id}").to_object()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a payment; the answer carries its ID and number"""
        return self.client.request(HttpMethod.POST, "payments", json=data).to_object()

    def update(self, payment_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"payments/{payment_id}", json=data
        ).to_object()

    def delete(self, payment_id: str) -> Dict[str, Any]:
        return self.client.request(HttpMethod.DELETE, f"payments/{payment_id}").to_object()

    def unapply(self, payment_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"payments/{payment_id}/unapply"
        ).to_object()

    def refund(self, payment_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Refund a payment

        Args:
            payment_id: Payment ID
            data: Refund details such as "totalAmount", "type" and "comment"
        """
        return self.client.request(
            HttpMethod.POST, f"payments/{payment_id}/refunds", json=data
        ).to_object()
