"""Exceptions raised by the strategy advisor."""

from __future__ import annotations

from typing import Iterable, Optional


class AdvisorError(Exception):
    """Base class for strategy advisor errors."""


class InvalidTransition(AdvisorError):
    """An operation or answer is not defined for the current questionnaire step.

    This is a caller-contract violation: the engine never coerces it to a
    default strategy.
    """

    def __init__(
        self,
        message: str,
        step: Optional[str] = None,
        token: Optional[str] = None,
        valid_tokens: Iterable[str] = (),
    ):
        super().__init__(message)
        self.step = step
        self.token = token
        self.valid_tokens = tuple(valid_tokens)
