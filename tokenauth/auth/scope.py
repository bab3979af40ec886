"""
Compact scope strings.

A scope is a list of ``resource:permission`` rules such as
``["admin:read", "admin:write"]``. ``Scope.create`` packs it into a short
string (``"a:r:w"``) suitable for a token claim and ``Scope.parse`` unpacks
it again.
"""

import logging
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = {
    "read": "r",
    "write": "w",
}

RESOURCE_SEPARATOR = "|"
PERMISSION_SEPARATOR = ":"


class Scope:
    """
    Scope encoder/decoder with an abbreviation table.

    Args:
        scope: Extra abbreviations merged over ``{"read": "r", "write": "w"}``.
            Names missing from the table are used verbatim.
    """

    def __init__(self, scope: Optional[Dict[str, str]] = None):
        self._scope: Dict[str, str] = {**DEFAULT_SCOPE, **(scope or {})}
        self._reverse_scope: Dict[str, str] = {v: k for k, v in self._scope.items()}

    def _short(self, name: str) -> str:
        return self._scope.get(name) or name

    def _long(self, name: str) -> str:
        return self._reverse_scope.get(name) or name

    def create(self, scope: List[str]) -> str:
        """
        Return a scope in the format ``'a:r:w'`` from rules like
        ``['admin:read', 'admin:write']``.

        Consecutive rules for the same resource are merged into one group.
        Rules for a resource that are not adjacent produce separate groups.
        """
        if not scope:
            return ""

        groups: List[str] = []
        last_name = None

        for rule in scope:
            role = [self._short(part) for part in rule.split(PERMISSION_SEPARATOR)]

            if role[0] == last_name:
                groups[-1] += PERMISSION_SEPARATOR + PERMISSION_SEPARATOR.join(role[1:])
                continue

            last_name = role[0]
            groups.append(PERMISSION_SEPARATOR.join(role))

        return RESOURCE_SEPARATOR.join(groups)

    def parse(self, scope_str: str) -> List[str]:
        """Return a scope string as a list of ``resource:permission`` rules."""
        if not scope_str:
            return []

        rules: List[str] = []
        for group in scope_str.split(RESOURCE_SEPARATOR):
            name, *perms = [self._long(part) for part in group.split(PERMISSION_SEPARATOR)]
            rules.extend(f"{name}{PERMISSION_SEPARATOR}{perm}" for perm in perms)

        if not rules:
            logger.debug("Scope string produced no rules")

        return rules

    def has(self, scope: List[str], perm: Union[str, List[str]]) -> bool:
        """
        Check whether a parsed scope includes a permission.

        When ``perm`` is a list, any one of its entries is enough.
        """
        if not scope:
            return False

        perms = [perm] if isinstance(perm, str) else list(perm)
        return any(rule in perms for rule in scope)
