"""
Base entity
Common operations shared by every Zuora resource
"""

from typing import Any, Dict, Optional

from zuora_api.client.http_client import HttpClient, HttpMethod
from zuora_api.exceptions import UnimplementedOperationError


class Entity:
    """
    Base class of the resource entities

    Subclasses override the CRUD operations their endpoint supports; the
    others raise UnimplementedOperationError.
    """

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    def _unimplemented(self, operation: str) -> UnimplementedOperationError:
        return UnimplementedOperationError(type(self).__name__, operation)

    def all(self, *args: Any, **kwargs: Any) -> Any:
        raise self._unimplemented("all")

    def get(self, *args: Any, **kwargs: Any) -> Any:
        raise self._unimplemented("get")

    def create(self, *args: Any, **kwargs: Any) -> Any:
        raise self._unimplemented("create")

    def update(self, *args: Any, **kwargs: Any) -> Any:
        raise self._unimplemented("update")

    def delete(self, *args: Any, **kwargs: Any) -> Any:
        raise self._unimplemented("delete")

    def query(self, query: str) -> Dict[str, Any]:
        """
        Run a ZOQL query

        ZOQL has no joins, aggregate functions, wildcards or ORDER BY;
        every field must be named explicitly.

        Args:
            query: ZOQL statement, e.g. "select Id, Name from account"

        Returns:
            Decoded result with "records", "size", "done" and, when the
            result is paged, "queryLocator"
        """
        return self.client.request(
            HttpMethod.POST, "action/query", json={"queryString": query}
        ).to_object()

    def query_more(self, query_locator: str) -> Dict[str, Any]:
        """Fetch the next page of a ZOQL result"""
        return self.client.request(
            HttpMethod.POST, "action/queryMore", json={"queryLocator": query_locator}
        ).to_object()

    def get_resource(
        self,
        verb: str,
        endpoint: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Call any endpoint below the API version prefix

        Useful for Zuora flows no entity covers.

        Args:
            verb: HTTP verb
            endpoint: Path after the API version, e.g. "/catalog/products"
            data: JSON payload (optional)
            headers: Extra headers (optional)

        Returns:
            Decoded response body
        """
        return self.client.request(verb, endpoint, json=data, headers=headers).to_object()
