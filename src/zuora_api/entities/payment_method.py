"""Payment method entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class PaymentMethod(Entity):
    """
    Payment methods

    Cards and SEPA mandates are created from a token already issued by the
    payment gateway; card details never go through this SDK.
    """

    def get(self, payment_method_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.GET, f"object/payment-method/{payment_method_id}"
        ).to_object()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Bind a gateway token to an existing account

        Args:
            data: e.g. {"AccountId": ..., "Type": "CreditCardReferenceTransaction",
                "TokenId": ..., "SecondTokenId": ...}
        """
        return self.client.request(
            HttpMethod.POST, "object/payment-method", json=data
        ).to_object()

    def update(self, payment_method_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"object/payment-method/{payment_method_id}", json=data
        ).to_object()

    def delete(self, payment_method_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.DELETE, f"object/payment-method/{payment_method_id}"
        ).to_object()

    def set_default_payment(self, account_id: str, payment_method_id: str) -> Dict[str, Any]:
        """Make the payment method the default one of the account"""
        return self.client.request(
            HttpMethod.PUT,
            f"object/account/{account_id}",
            json={"DefaultPaymentMethodId": payment_method_id},
        ).to_object()
