"""Configuration management for the queue tailer."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if exists (local use only)
load_dotenv()


def _get_bool(key: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(key)
    if not value:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


def _get_int(key: str, default: int) -> int | None:
    """Read an integer from the environment, None if it is not a number."""
    value = os.getenv(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class Config:
    """Tailer configuration loaded from environment variables.

    Command-line flags take precedence over every value here. Numeric
    variables that fail to parse are kept as None and reported by validate().
    """

    # AWS
    aws_region: str = os.getenv("AWS_REGION", "")
    aws_profile: str = os.getenv("AWS_PROFILE", "")

    # Queue
    queue_name: str = os.getenv("SQS_TAIL_QUEUE", "")
    wait_time: int | None = _get_int("SQS_TAIL_WAIT_TIME", 10)
    max_messages: int | None = _get_int("SQS_TAIL_MAX_MESSAGES", 10)
    list_limit: int | None = _get_int("SQS_TAIL_LIST_LIMIT", 20)

    # Output
    truncate: str = os.getenv("SQS_TAIL_TRUNCATE", "")
    truncate_at: int | None = _get_int("SQS_TAIL_TRUNCATE_AT", 36)
    color: bool = _get_bool("SQS_TAIL_COLOR", True)

    def validate(self) -> None:
        """Validate configuration types and ranges."""
        for field, env_key in (
            ("truncate_at", "SQS_TAIL_TRUNCATE_AT"),
            ("wait_time", "SQS_TAIL_WAIT_TIME"),
            ("max_messages", "SQS_TAIL_MAX_MESSAGES"),
            ("list_limit", "SQS_TAIL_LIST_LIMIT"),
        ):
            if getattr(self, field) is None:
                raise ValueError(f"{env_key} must be an integer")

        if self.truncate_at <= 0:
            raise ValueError("truncateAt must be a positive integer")

        if not 0 <= self.wait_time <= 20:
            raise ValueError("wait time must be between 0 and 20 seconds")

        if not 1 <= self.max_messages <= 10:
            raise ValueError("max messages must be between 1 and 10")

        if self.list_limit <= 0:
            raise ValueError("SQS_TAIL_LIST_LIMIT must be a positive integer")


config = Config()
