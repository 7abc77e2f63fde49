"""Exception types.

Almost nothing in the board pipeline raises to its caller: every stage has a
fallback. These exist for the few seams where a failure is real but local.
"""

from __future__ import annotations


class DreamboardError(Exception):
    """Base class for dreamboard errors."""


class ProviderError(DreamboardError):
    """An image provider call failed or returned an unusable payload.

    Raised inside provider adapters only; the discovery agent isolates it.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class UnknownTemplateError(DreamboardError, KeyError):
    """Strict template lookup by an id that is not in the catalog."""
