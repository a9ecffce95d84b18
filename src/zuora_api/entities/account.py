"""Account entity"""

from typing import Any, Dict

from zuora_api.client.http_client import HttpMethod
from zuora_api.entities.base import Entity
from zuora_api.models.entity_field import EntityField
from zuora_api.utils.zoql import prepare_fields_query


class Account(Entity):
    """Customer accounts"""

    # Fields the describe API lists but ZOQL refuses to select
    QUERY_EXCLUDED_FIELDS = (
        "SequenceSetId",
        "TaxExemptEntityUseCode",
        "TotalDebitMemoBalance",
        "UnappliedCreditMemoAmount",
    )

    def all(self) -> Dict[str, Any]:
        """Retrieve every account through a ZOQL query on all selectable fields"""
        fields = prepare_fields_query(self.fields(), self.QUERY_EXCLUDED_FIELDS)
        return self.query(f"select {fields} from account")

    def get(self, account_key: str, summary: bool = False) -> Dict[str, Any]:
        """
        Retrieve an account by ID or account number

        Args:
            account_key: Account ID or number
            summary: Also return the related subscriptions, invoices, payments
        """
        path = f"accounts/{account_key}"
        if summary:
            path += "/summary"
        return self.client.request(HttpMethod.GET, path).to_object()

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an account; the answer carries accountId and accountNumber"""
        return self.client.request(HttpMethod.POST, "accounts", json=data).to_object()

    def update(self, account_key: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request(
            HttpMethod.PUT, f"accounts/{account_key}", json=data
        ).to_object()

    def delete(self, account_id: str) -> Dict[str, Any]:
        """Delete an account; needs the object ID, not the account number"""
        return self.client.request(
            HttpMethod.DELETE, f"object/account/{account_id}"
        ).to_object()

    def fields(self) -> Dict[str, Dict[str, Any]]:
        """
        List the account fields from the describe API

        Returns:
            Mapping of field name to its name, label, custom, required and type
        """
        described = self.client.request(
            HttpMethod.GET, "describe/Account"
        ).to_object("fields")

        raw_fields = described.get("field", []) if isinstance(described, dict) else described
        if isinstance(raw_fields, dict):
            raw_fields = [raw_fields]

        fields: Dict[str, Dict[str, Any]] = {}
        for raw_field in raw_fields:
            field = EntityField.model_validate(raw_field)
            if field.label is None:
                field = field.model_copy(update={"label": field.name})
            fields[field.name] = field.model_dump()
        return fields

    def field(self, name: str) -> Dict[str, Any]:
        """
        Describe one account field

        Returns:
            The field details, or {"success": False, "message": ...} when the
            account object has no such field
        """
        fields = self.fields()
        if name in fields:
            return fields[name]
        return {"success": False, "message": f"Field {name} not found"}
