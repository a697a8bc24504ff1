"""Infrastructure package."""

from sqs_tail.infrastructure.dependency_injection import DependenciesContainer
from sqs_tail.infrastructure.sqs_client import SQSClient

__all__ = [
    "DependenciesContainer",
    "SQSClient",
]
