"""ZOQL helpers"""

from typing import Iterable, Mapping, Any


def prepare_fields_query(fields: Mapping[str, Any], excluded: Iterable[str] = ()) -> str:
    """
    Build the comma separated field list of a ZOQL select

    Args:
        fields: Mapping keyed by field name (e.g. the output of Account.fields())
        excluded: Field names to leave out

    Returns:
        Field names joined with commas, in mapping order
    """
    skip = set(excluded)
    return ",".join(name for name in fields if name not in skip)
