"""
Typed failures raised by the harness.

Every failure names the semantic role and the operation that triggered
it so that a failing scenario reports something actionable. Nothing in
the harness catches these: they propagate to the calling test.
"""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for all harness failures."""


class _RoleOperationError(HarnessError):
    """Failure tied to a semantic role and the operation performed on it."""

    def __init__(self, role: str, operation: str, detail: str = ""):
        self.role = role
        self.operation = operation
        self.detail = detail
        message = f"{operation} on '{role}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ElementNotReady(_RoleOperationError):
    """Target was absent, hidden or disabled past the wait bound."""


class ElementNotFound(ElementNotReady):
    """No element matched the role within the wait bound."""


class StateTransitionTimeout(_RoleOperationError):
    """A commit/close action's expected post-condition never became true."""


class PreconditionViolated(HarnessError):
    """A read or action was attempted against a component in the wrong state."""


class ExtractionMismatch(HarnessError):
    """Rendered labels could not be matched to the expected labels."""


class ApiContractError(HarnessError):
    """The listing endpoint answered with an unexpected body."""
