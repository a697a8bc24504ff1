"""Terminal rendering of message bodies."""

import json
import logging

from rich.console import Console

from sqs_tail.models.schemas import TruncationSpec
from sqs_tail.services.truncator import truncate

logger = logging.getLogger(__name__)


class Renderer:
    """Prints message bodies as indented JSON, or as raw text when not JSON."""

    def __init__(
        self,
        console: Console,
        truncation: TruncationSpec | None = None,
        color: bool = True,
    ):
        """
        Initialize renderer.

        Args:
            console: rich Console to print to.
            truncation: Optional fields to shorten before printing.
            color: Whether to syntax-highlight JSON output.
        """
        self._console = console
        self._truncation = truncation
        self._color = color

    def _print_raw(self, body: str) -> None:
        """Write body exactly as received."""
        self._console.file.write(body + "\n")
        self._console.file.flush()

    def render(self, body: str) -> bool:
        """
        Print one decoded message body.

        Args:
            body: Decoded message body.

        Returns:
            True if printed as structured JSON, False if printed as raw text.
        """
        try:
            parsed = json.loads(body)
        except (ValueError, RecursionError):
            self._print_raw(body)
            return False

        if self._truncation is not None:
            truncate(parsed, self._truncation.paths, self._truncation.limit)

        try:
            self._console.print_json(data=parsed, indent=2, highlight=self._color)
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("Could not serialize message body, printing raw: %s", e)
            self._print_raw(body)
            return False
        return True
