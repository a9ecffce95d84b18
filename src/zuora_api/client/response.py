"""
Response wrapper for Zuora API calls
"""

import json
from typing import Any, Dict, Optional

import requests

from zuora_api.exceptions import DecodeError


class Response:
    """
    Successful HTTP response wrapper

    Bodies are exposed as plain decoded JSON (dicts, lists and scalars in
    the order Zuora sent them). Response shapes differ per endpoint, so no
    schema is applied here.

    Example:
        >>> response = client.request("GET", "accounts/A00000001")
        >>> account = response.to_object()
        >>> account["success"]
        True
    """

    def __init__(self, raw: requests.Response) -> None:
        self._raw = raw

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._raw.headers)

    @property
    def text(self) -> str:
        return self._raw.text

    @property
    def raw(self) -> requests.Response:
        return self._raw

    def to_object(self, root_key: Optional[str] = None) -> Any:
        """
        Decode the body as JSON

        Args:
            root_key: Key to unwrap the decoded mapping at (optional)

        Returns:
            Decoded body, or the value stored under root_key

        Raises:
            DecodeError: If the body is not JSON or root_key is missing
        """
        body = self.text
        if body.strip() == "":
            data: Any = {}
        else:
            try:
                data = json.loads(body)
            except ValueError as e:
                raise DecodeError(
                    f"Malformed JSON in response body: {body[:200]}",
                    body=body,
                    status_code=self.status_code,
                    cause=e,
                ) from e

        if root_key is None:
            return data

        if not isinstance(data, dict) or root_key not in data:
            raise DecodeError(
                f'Key "{root_key}" not found in response body',
                body=body,
                status_code=self.status_code,
            )
        return data[root_key]

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
