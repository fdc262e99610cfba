"""
Custom exception hierarchy for the Whale-opoly engine.

Provides typed errors that can be handled consistently across
the rules engine, the engine facade, and remote-authority adapters.
"""


class WhaleopolyError(Exception):
    """Base exception for all game-related errors."""


class InvalidActionError(WhaleopolyError):
    """Action is not legal in the current state.

    The message is the human-readable rejection reason surfaced to the caller.
    """

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.detail = detail


class RemoteAuthorityError(WhaleopolyError):
    """Remote authority could not produce a usable result."""
