"""SQS client wrapper for list/receive/delete operations."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from sqs_tail.errors import QueueTransportError

logger = logging.getLogger(__name__)


class SQSClient:
    """Handles SQS operations."""

    def __init__(self, client: Any):
        """
        Initialize SQS client wrapper.

        Args:
            client: boto3 SQS client instance.
        """
        self._client = client

    def list_queues(self, prefix: str, max_results: int = 20) -> list[str]:
        """
        List queue URLs whose name starts with a prefix.

        Only the first page is requested.

        Args:
            prefix: Queue name prefix.
            max_results: Maximum number of URLs to return.

        Returns:
            List of queue URLs.

        Raises:
            QueueTransportError: If the ListQueues call fails.
        """
        try:
            response = self._client.list_queues(
                QueueNamePrefix=prefix,
                MaxResults=max_results,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list SQS queues: %s", e)
            raise QueueTransportError("ListQueues", e) from e

        return response.get("QueueUrls", [])

    def receive_messages(
        self,
        queue_url: str,
        max_messages: int = 10,
        wait_time: int = 10,
    ) -> list[dict]:
        """
        Receive messages from SQS queue.

        Args:
            queue_url: SQS queue URL.
            max_messages: Maximum number of messages to receive.
            wait_time: Long polling wait time in seconds.

        Returns:
            List of raw SQS message dicts (with Body, ReceiptHandle, etc).

        Raises:
            QueueTransportError: If the ReceiveMessage call fails.
        """
        try:
            response = self._client.receive_message(
                QueueUrl=queue_url,
                MaxNumberOfMessages=max_messages,
                WaitTimeSeconds=wait_time,
            )
        except (ClientError, BotoCoreError) as e:
            raise QueueTransportError("ReceiveMessage", e) from e

        messages = response.get("Messages", [])
        if messages:
            logger.debug("Received %d message(s) from SQS", len(messages))
        return messages

    def delete_message(self, queue_url: str, receipt_handle: str) -> bool:
        """
        Delete a message from SQS queue.

        Args:
            queue_url: SQS queue URL.
            receipt_handle: Message receipt handle.

        Returns:
            True if deletion succeeded, False otherwise.
        """
        try:
            self._client.delete_message(
                QueueUrl=queue_url,
                ReceiptHandle=receipt_handle,
            )
            return True
        except Exception as e:
            logger.warning("Failed to delete SQS message: %s", e)
            return False
