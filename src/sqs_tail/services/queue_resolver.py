"""Queue resolver service for turning a name prefix into one queue URL."""

import logging

from sqs_tail.errors import AmbiguousQueueError, QueueNotFoundError
from sqs_tail.infrastructure.sqs_client import SQSClient

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 20


class QueueResolver:
    """Resolves a queue name or prefix to exactly one queue URL."""

    def __init__(self, sqs_client: SQSClient, max_results: int = DEFAULT_LIST_LIMIT):
        """
        Initialize queue resolver.

        Args:
            sqs_client: SQSClient instance.
            max_results: Cap on the single ListQueues page that is inspected.
        """
        self._sqs_client = sqs_client
        self._max_results = max_results

    def resolve(self, name: str) -> str:
        """
        Find the single queue matching a name prefix.

        No pagination is done: narrow lookups are the intended use.

        Args:
            name: Queue name or name prefix.

        Returns:
            The queue URL.

        Raises:
            QueueNotFoundError: If no queue matches, or name is empty.
            AmbiguousQueueError: If more than one queue matches.
            QueueTransportError: If listing fails.
        """
        if not name:
            raise QueueNotFoundError(name, "A queue name is required (use --queue)")

        urls = self._sqs_client.list_queues(prefix=name, max_results=self._max_results)

        if not urls:
            raise QueueNotFoundError(name)

        if len(urls) > 1:
            limit_reached = len(urls) == self._max_results
            logger.warning("Found %d queues matching '%s':", len(urls), name)
            for url in urls:
                logger.warning("\t%s", url)
            if limit_reached:
                logger.warning("There may be more than this, we hit the request limit.")
            raise AmbiguousQueueError(name, urls, limit_reached=limit_reached)

        return urls[0]
