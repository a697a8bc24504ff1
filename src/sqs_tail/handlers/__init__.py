"""Handlers package."""

from sqs_tail.handlers.poll import process_message, run_poll_loop

__all__ = ["process_message", "run_poll_loop"]
