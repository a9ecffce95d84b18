"""Models module initialization"""

from zuora_api.models.token import Token
from zuora_api.models.entity_field import EntityField

__all__ = [
    "Token",
    "EntityField",
]
