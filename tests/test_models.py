"""Tests for Pydantic models and configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sqs_tail.config import Config, _get_bool, _get_int
from sqs_tail.models.schemas import PollStats, QueueMessage, TruncationSpec


class TestQueueMessage:
    """Tests for QueueMessage model."""

    def test_from_sqs(self):
        """Test building a message from a boto3 dict."""
        message = QueueMessage.from_sqs(
            {"Body": "hello", "ReceiptHandle": "handle-1", "MessageId": "m-1", "MD5OfBody": "x"}
        )

        assert message.body == "hello"
        assert message.receipt_handle == "handle-1"
        assert message.message_id == "m-1"

    def test_from_sqs_without_body(self):
        """Test a missing Body maps to None."""
        message = QueueMessage.from_sqs({"ReceiptHandle": "handle-1"})

        assert message.body is None
        assert message.receipt_handle == "handle-1"


class TestTruncationSpec:
    """Tests for TruncationSpec model."""

    def test_from_csv(self):
        """Test comma-separated paths keep their order."""
        spec = TruncationSpec.from_csv("user,details.event", limit=10)

        assert spec.paths == ["user", "details.event"]
        assert spec.limit == 10

    def test_from_csv_empty_disables(self):
        """Test an empty value means no truncation."""
        assert TruncationSpec.from_csv("") is None
        assert TruncationSpec.from_csv(",,") is None

    def test_from_csv_drops_blank_items(self):
        """Test stray commas are ignored."""
        spec = TruncationSpec.from_csv("user,,event,")

        assert spec.paths == ["user", "event"]
        assert spec.limit == 36

    @pytest.mark.parametrize("limit", [0, -5])
    def test_limit_must_be_positive(self, limit):
        """Test non-positive limits are rejected."""
        with pytest.raises(ValidationError):
            TruncationSpec(paths=["user"], limit=limit)


class TestPollStats:
    """Tests for PollStats model."""

    def test_defaults(self):
        """Test counters start at zero and can be incremented."""
        stats = PollStats()
        stats.received += 2

        assert stats.received == 2
        assert stats.deleted == 0
        assert stats.delete_failures == 0


class TestConfig:
    """Tests for Config validation."""

    def test_validate_defaults(self):
        """Test default values are valid."""
        Config(truncate_at=36, wait_time=10, max_messages=10, list_limit=20).validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"truncate_at": 0},
            {"wait_time": 21},
            {"wait_time": -1},
            {"max_messages": 0},
            {"max_messages": 11},
            {"list_limit": 0},
        ],
    )
    def test_validate_rejects_out_of_range(self, overrides):
        """Test out-of-range values raise ValueError."""
        values = {"truncate_at": 36, "wait_time": 10, "max_messages": 10, "list_limit": 20}
        values.update(overrides)

        with pytest.raises(ValueError):
            Config(**values).validate()

    @pytest.mark.parametrize(
        "raw, expected",
        [("false", False), ("0", False), ("No", False), ("true", True), ("1", True), ("", True)],
    )
    def test_get_bool(self, raw, expected):
        """Test boolean env parsing."""
        with patch.dict("os.environ", {"SQS_TAIL_COLOR": raw}):
            assert _get_bool("SQS_TAIL_COLOR", True) is expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("15", 15), ("", 10), ("soon", None), ("2.5", None)],
    )
    def test_get_int(self, raw, expected):
        """Test integer env parsing keeps bad values as None instead of raising."""
        with patch.dict("os.environ", {"SQS_TAIL_WAIT_TIME": raw}):
            assert _get_int("SQS_TAIL_WAIT_TIME", 10) == expected

    def test_validate_rejects_non_numeric_env_value(self):
        """Test an unparsed env value is reported by name."""
        config = Config(truncate_at=36, wait_time=None, max_messages=10, list_limit=20)

        with pytest.raises(ValueError, match="SQS_TAIL_WAIT_TIME must be an integer"):
            config.validate()
