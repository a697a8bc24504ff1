"""
Custom exceptions for sqs_tail.

Resolution and transport errors are fatal for the CLI. Decode, render and
delete problems never raise; they degrade in place.
"""

from typing import Any


class SQSTailError(Exception):
    """Base exception for all sqs_tail errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class QueueResolutionError(SQSTailError):
    """Base class for failures to turn a queue name into a single URL."""

    pass


class QueueNotFoundError(QueueResolutionError):
    """No queue matches the given name."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or "No queues found matching that name")


class AmbiguousQueueError(QueueResolutionError):
    """More than one queue matches the given name."""

    def __init__(self, name: str, candidates: list[str], limit_reached: bool = False):
        self.name = name
        self.candidates = list(candidates)
        self.limit_reached = limit_reached
        super().__init__(
            "Please narrow down your search by providing a specific name",
            context={"matches": len(self.candidates), "limit_reached": limit_reached},
        )


class QueueTransportError(SQSTailError):
    """An SQS API call failed at the service or connection level."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")
