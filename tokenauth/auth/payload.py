"""
Payload key mapping for access tokens.

Access tokens travel with short claim names (``uId``) while application code
works with descriptive ones (``id``). ``Payload`` translates between both
shapes and drops empty values on the way.
"""

from typing import Any, Dict, List, Optional, Tuple

PayloadEntry = Tuple[str, str]


def is_empty(value: Any) -> bool:
    """
    Check whether a payload value should be left out of a token.

    ``None``, empty mappings and collections, and blank strings are empty.
    ``0`` and ``False`` are real values and are kept.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


class Payload:
    """
    Bidirectional claim name mapping.

    Built from a ``{compact_key: canonical_key}`` mapping, e.g.
    ``Payload({"uId": "id", "cId": "companyId"})``. ``create`` turns a
    canonical payload into its compact form and ``parse`` reverses it. Keys
    absent from the mapping are dropped, except when the mapping is empty:
    then both directions return the payload untouched.
    """

    def __init__(self, payload: Optional[Dict[str, str]] = None):
        self._payload: List[PayloadEntry] = list((payload or {}).items())
        self._reverse_payload: List[PayloadEntry] = [
            (key, compact_key) for compact_key, key in self._payload
        ]

    @property
    def entries(self) -> List[PayloadEntry]:
        """(compact_key, canonical_key) pairs in declaration order."""
        return list(self._payload)

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Return the compact form of a canonical payload."""
        return self._reverse(self._reverse_payload, payload)

    def parse(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Return the canonical form of a compact payload."""
        return self._reverse(self._payload, payload)

    @staticmethod
    def _reverse(keys: List[PayloadEntry], payload: Dict[str, Any]) -> Dict[str, Any]:
        if not keys:
            return payload

        result = {}
        for source_key, target_key in keys:
            value = payload.get(source_key)
            if not is_empty(value):
                result[target_key] = value

        return result
