"""Pydantic models for received messages and output settings."""

from pydantic import BaseModel, field_validator


class QueueMessage(BaseModel):
    """Message received from an SQS queue."""

    body: str | None = None
    receipt_handle: str | None = None
    message_id: str | None = None

    @classmethod
    def from_sqs(cls, raw: dict) -> "QueueMessage":
        """Build from a boto3 receive_message entry."""
        return cls(
            body=raw.get("Body"),
            receipt_handle=raw.get("ReceiptHandle"),
            message_id=raw.get("MessageId"),
        )


class TruncationSpec(BaseModel):
    """Dotted field paths to shorten, with one shared length threshold."""

    paths: list[str]
    limit: int = 36

    @field_validator("limit")
    @classmethod
    def limit_must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("truncation limit must be a positive integer")
        return value

    @classmethod
    def from_csv(cls, fields: str, limit: int = 36) -> "TruncationSpec | None":
        """
        Parse a comma-separated list of dotted paths.

        Args:
            fields: Value of the truncate flag, e.g. ``"user,details.event"``.
            limit: Character threshold for every path.

        Returns:
            A TruncationSpec, or None when no paths were given.
        """
        paths = [path for path in fields.split(",") if path]
        if not paths:
            return None
        return cls(paths=paths, limit=limit)


class PollStats(BaseModel):
    """Running counters for the poll loop."""

    batches: int = 0
    received: int = 0
    rendered: int = 0
    deleted: int = 0
    delete_failures: int = 0
