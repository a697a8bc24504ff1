"""Dependency injection container for the application."""

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer
from rich.console import Console

from sqs_tail.infrastructure.sqs_client import SQSClient


def _create_session(region: str | None, profile: str | None) -> boto3.Session:
    """Create boto3 session.

    Falls back to the default credential chain when no profile is given.
    """
    return boto3.Session(
        region_name=region or None,
        profile_name=profile or None,
    )


def _create_console(color: bool) -> Console:
    """Create the output console (stdout)."""
    return Console(no_color=not color, highlight=color)


def _create_queue_resolver(sqs_client: SQSClient, max_results: int):
    """Factory for QueueResolver to avoid circular import."""
    from sqs_tail.services.queue_resolver import QueueResolver

    return QueueResolver(sqs_client, max_results=max_results)


def _create_renderer(console: Console, truncation, color: bool):
    """Factory for Renderer to avoid circular import."""
    from sqs_tail.services.renderer import Renderer

    return Renderer(console, truncation=truncation, color=color)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    settings = providers.Configuration()

    # Session (named profile or default credential chain)
    session = providers.Singleton(
        _create_session,
        region=settings.aws_region,
        profile=settings.aws_profile,
    )

    # SQS dependency chain
    sqs_boto_client = providers.Singleton(
        lambda session: session.client("sqs"),
        session=session,
    )

    sqs_client = providers.Singleton(
        SQSClient,
        client=sqs_boto_client,
    )

    queue_resolver = providers.Singleton(
        _create_queue_resolver,
        sqs_client=sqs_client,
        max_results=settings.list_limit,
    )

    # Output
    console = providers.Singleton(
        _create_console,
        color=settings.color,
    )

    renderer = providers.Factory(
        _create_renderer,
        console=console,
        truncation=settings.truncation,
        color=settings.color,
    )
