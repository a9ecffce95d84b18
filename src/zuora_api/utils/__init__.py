"""Utilities module initialization"""

from zuora_api.utils.zoql import prepare_fields_query

__all__ = ["prepare_fields_query"]
