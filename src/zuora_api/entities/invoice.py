"""Invoice entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity


class Invoice(Entity):
    """Invoices (read only)"""

    def get(self, invoice_id: str) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.GET, f"object/invoice/{invoice_id}"
        ).to_object()
