"""Poll handler for draining a queue and rendering each message."""

import logging

from sqs_tail.infrastructure.sqs_client import SQSClient
from sqs_tail.models.schemas import PollStats, QueueMessage
from sqs_tail.services.envelope import decode
from sqs_tail.services.renderer import Renderer

logger = logging.getLogger(__name__)


def process_message(
    message: QueueMessage,
    sqs_client: SQSClient,
    queue_url: str,
    renderer: Renderer,
    stats: PollStats,
) -> None:
    """
    Render a single message, then delete it from the queue.

    The delete is issued whether or not rendering worked.

    Args:
        message: Received message.
        sqs_client: SQS client wrapper.
        queue_url: Resolved queue URL.
        renderer: Renderer for the message body.
        stats: Counters to update.
    """
    try:
        if message.body is not None:
            renderer.render(decode(message.body))
            stats.rendered += 1
    except Exception as e:
        logger.error("Failed to render message %s: %s", message.message_id, e, exc_info=True)

    if not message.receipt_handle:
        logger.warning("Message %s has no receipt handle, not deleting", message.message_id)
        return

    if sqs_client.delete_message(queue_url=queue_url, receipt_handle=message.receipt_handle):
        stats.deleted += 1
    else:
        stats.delete_failures += 1


def run_poll_loop(
    sqs_client: SQSClient,
    queue_url: str,
    renderer: Renderer,
    wait_time: int = 10,
    max_messages: int = 10,
    max_batches: int | None = None,
) -> PollStats:
    """
    Receive and render messages until interrupted.

    Receive errors propagate as QueueTransportError and end the loop.

    Args:
        sqs_client: SQS client wrapper.
        queue_url: Resolved queue URL.
        renderer: Renderer for message bodies.
        wait_time: Long polling wait time in seconds.
        max_messages: Maximum messages per receive call.
        max_batches: Stop after this many receive calls (None polls forever).

    Returns:
        Counters for the processed messages.
    """
    stats = PollStats()

    while max_batches is None or stats.batches < max_batches:
        raw_messages = sqs_client.receive_messages(
            queue_url=queue_url,
            max_messages=max_messages,
            wait_time=wait_time,
        )
        stats.batches += 1

        if not raw_messages:
            logger.debug("No messages received, continuing to poll...")
            continue

        for raw in raw_messages:
            stats.received += 1
            process_message(
                message=QueueMessage.from_sqs(raw),
                sqs_client=sqs_client,
                queue_url=queue_url,
                renderer=renderer,
                stats=stats,
            )

        logger.debug(
            "Stats: %d received, %d rendered, %d deleted, %d delete failures",
            stats.received,
            stats.rendered,
            stats.deleted,
            stats.delete_failures,
        )

    return stats
