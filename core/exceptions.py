"""Exception hierarchy for the storefront.

Hierarchy:
    StorefrontError (base)
    ├── MissingCollaboratorError - required cart/catalog/rule/process is absent
    ├── InvalidItemError         - negative quantity or unit price on an Item
    ├── InvalidOrderError        - negative quantity in an order request
    ├── UnknownRuleError         - rule name not present in the registry
    └── ConfigError              - malformed pricing configuration

Unresolved ISBNs and absent orders are modelled outcomes, not errors, so
they have no exception type here.
"""

from typing import Any, Optional


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MissingCollaboratorError(StorefrontError, ValueError):
    """A required collaborator was None at construction time."""

    def __init__(self, owner: str, collaborator: str):
        super().__init__(
            f"{owner} requires a {collaborator}",
            {"owner": owner, "collaborator": collaborator},
        )
        self.owner = owner
        self.collaborator = collaborator


class InvalidItemError(StorefrontError, ValueError):
    """An item was built with a negative quantity or unit price."""


class InvalidOrderError(StorefrontError, ValueError):
    """An order request carries quantities that cannot be priced."""


class UnknownRuleError(StorefrontError, KeyError):
    """A rule name was not found in the rule registry."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown price rule: {name}",
            {"rule": name, "available": available},
        )
        self.name = name

    # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return StorefrontError.__str__(self)


class ConfigError(StorefrontError, ValueError):
    """Pricing configuration is malformed."""
