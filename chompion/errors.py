"""
Engine exceptions.

Validation problems surface to the caller before any scoring runs; missing
records are tolerated by batch operations and reported per id.
"""
from __future__ import annotations


class EngineError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(EngineError):
    """User-facing input problem (bad entry, bad category set)."""

    def __init__(self, *problems: str) -> None:
        self.problems: list[str] = list(problems) or ["invalid input"]
        super().__init__("; ".join(self.problems))


class InvalidWeightSet(ValidationError):
    """Category weights do not add up to 100% at commit time."""


class NotFoundError(EngineError):
    """A referenced entry or category id does not exist."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id!r} not found")
