"""Models package."""

from sqs_tail.models.schemas import PollStats, QueueMessage, TruncationSpec

__all__ = ["PollStats", "QueueMessage", "TruncationSpec"]
