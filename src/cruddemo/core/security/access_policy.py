"""Role requirements keyed by HTTP method and request path."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.cruddemo.runtime.config.config_data import SecurityConfig

from .credentials import Principal

_WILDCARD_SUFFIX = "/**"

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True)
class AccessRule:
    """A single ``method pattern -> role`` entry.

    ``pattern`` is either an exact path or a prefix ending in ``/**``. The
    wildcard form only matches paths strictly below the prefix, so
    ``/api/employees/**`` matches ``/api/employees/7`` but not
    ``/api/employees`` itself. Spring's ``AntPathMatcher`` would match both.
    """

    method: str
    pattern: str
    role: str

    def matches(self, method: str, path: str) -> bool:
        if method.upper() != self.method:
            return False
        if self.pattern.endswith(_WILDCARD_SUFFIX):
            prefix = self.pattern[: -len(_WILDCARD_SUFFIX)]
            return path.startswith(prefix + "/") and len(path) > len(prefix) + 1
        return path == self.pattern


def _join_prefix(api_prefix: str, pattern: str) -> str:
    return api_prefix.rstrip("/") + "/" + pattern.lstrip("/")


class AccessPolicy:
    """Ordered rule table; the first rule matching a request decides its role."""

    def __init__(self, rules: Iterable[AccessRule]):
        self._rules = tuple(rules)

    @classmethod
    def from_config(cls, security: SecurityConfig, api_prefix: str = "") -> AccessPolicy:
        """Build the policy, anchoring every configured pattern under ``api_prefix``."""
        return cls(
            AccessRule(
                method=rule.method,
                pattern=_join_prefix(api_prefix, rule.pattern),
                role=rule.role,
            )
            for rule in security.rules
        )

    @property
    def rules(self) -> tuple[AccessRule, ...]:
        return self._rules

    def required_role(self, method: str, path: str) -> str | None:
        """Return the role the request needs, or None when it is unrestricted."""
        for rule in self._rules:
            if rule.matches(method, path):
                return rule.role
        return None

    def is_allowed(self, principal: Principal | None, method: str, path: str) -> bool:
        role = self.required_role(method, path)
        if role is None:
            return True
        return principal is not None and principal.has_role(role)

    def unprotected(self, routes: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
        """Return the ``(method, path)`` pairs that change state but match no rule."""
        return [
            (method, path)
            for method, path in routes
            if method in MUTATING_METHODS and self.required_role(method, path) is None
        ]
