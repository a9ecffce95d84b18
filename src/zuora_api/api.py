"""
Top-level Zuora API facade
Resolves resource names to entities sharing one HTTP client
"""

from functools import partial
from typing import Any, Callable, Dict, Optional, Union

from zuora_api.client.http_client import HttpClient
from zuora_api.config.config_loader import ConfigLoader
from zuora_api.config.zuora_config import ZuoraConfig
from zuora_api.entities import RESOURCES, Entity
from zuora_api.exceptions import ConfigError, UnknownResourceError


def resource_class_name(name: str) -> str:
    """Turn "account", "paymentMethod" or "payment_method" into a class name"""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


class ZuoraApi:
    """
    Zuora API entry point

    Any registered resource can be reached as a method named after it;
    positional and keyword arguments go to the entity constructor.

    Example:
        >>> zuora = ZuoraApi({
        ...     "clientId": "...",
        ...     "clientSecret": "...",
        ...     "baseUri": "https://rest.sandbox.eu.zuora.com",
        ...     "apiVersion": "v1",
        ... })
        >>> zuora.account().get("A00000001")
        >>> zuora.payment_method().set_default_payment("A00000001", "2c92...")
    """

    def __init__(
        self,
        config: Optional[Union[ZuoraConfig, Dict[str, Any]]] = None,
        client: Optional[HttpClient] = None,
    ) -> None:
        """
        Args:
            config: Configuration as ZuoraConfig or dictionary
            client: Preconstructed HTTP client; config is ignored when given

        Raises:
            ConfigError: If neither client nor a non-empty config is given
            ValidationError: If the configuration dictionary is invalid
        """
        if client is None:
            if config is None or (isinstance(config, dict) and not config):
                raise ConfigError("The Zuora auth configuration is missing")
            if not isinstance(config, ZuoraConfig):
                config = ConfigLoader().resolve(config)
            client = HttpClient(config)

        self.client = client

    def resource(self, name: str, *args: Any, **kwargs: Any) -> Entity:
        """
        Build the entity registered under name

        Raises:
            UnknownResourceError: If no entity has that name
        """
        return self._resolve(name)(*args, **kwargs)

    def _resolve(self, name: str) -> Callable[..., Entity]:
        entity = RESOURCES.get(resource_class_name(name))
        if entity is None:
            raise UnknownResourceError(name)
        return partial(entity, self.client)

    def __getattr__(self, name: str) -> Callable[..., Entity]:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._resolve(name)

    def close(self) -> None:
        """Close the underlying HTTP client"""
        self.client.close()

    def __enter__(self) -> "ZuoraApi":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
