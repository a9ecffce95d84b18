"""Product entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class Product(Entity):
    """Catalog products"""

    def get(self, product_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.GET, f"object/product/{product_id}"
        ).to_object()

    def get_rate_plans(self, product_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.GET, f"rateplan/{product_id}/productRatePlan"
        ).to_object()
