# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : outcomes.py
#   file_relpath : src/boilersuite/core/outcomes.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Validation outcomes.

A successful validation is represented by ``None``; anything else is a
`Failure` value. Failures are collected by the caller and reported once the
whole scan is done, so they are never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureReason(Enum):
    """Why a file did not validate."""

    MISSING_BOILERPLATE = "missing boilerplate"
    INCORRECT_BOILERPLATE = "incorrect boilerplate"
    READ_ERROR = "failed to read"


@dataclass(frozen=True)
class Failure:
    """A failed validation.

    Attributes:
        reason (FailureReason): Failure category.
        patch (str | None): Unified diff turning the actual content into the
            expected content, when requested.
        error (Exception | None): Underlying exception for `FailureReason.READ_ERROR`.
    """

    reason: FailureReason
    patch: str | None = None
    error: Exception | None = None

    @property
    def message(self) -> str:
        """Human-readable description used in reports."""
        if self.error is not None:
            return f"{self.reason.value}: {self.error}"
        return self.reason.value

    def __str__(self) -> str:
        if self.patch:
            return f"{self.message}\n{self.patch}"
        return self.message
