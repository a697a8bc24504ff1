"""Entry point for the sqs-tail CLI."""

import argparse
import dataclasses
import logging
import sys

from botocore.exceptions import BotoCoreError
from pydantic import ValidationError

from sqs_tail.config import Config, config
from sqs_tail.errors import QueueResolutionError, QueueTransportError
from sqs_tail.handlers.poll import run_poll_loop
from sqs_tail.infrastructure import DependenciesContainer
from sqs_tail.models.schemas import TruncationSpec

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging; stdout is reserved for rendered messages."""
    if sys.stdout.encoding and sys.stdout.encoding.lower() != "utf-8":
        sys.stdout.reconfigure(encoding="utf-8")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # boto debug output drowns the messages we are tailing
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser(defaults: Config) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from config."""
    parser = argparse.ArgumentParser(
        prog="sqs-tail",
        description="Listen to an SQS queue and pretty-print every message it receives",
    )
    parser.add_argument(
        "--queue",
        "-queue",
        default=defaults.queue_name,
        help="name of the queue you want to listen to (a unique prefix is enough)",
    )
    parser.add_argument(
        "--truncate",
        "-truncate",
        default=defaults.truncate,
        help=(
            "optionally set a list of field names to be truncated in the output. "
            "Separate with commas and don't pad with whitespace. If you need to "
            "specify multiple levels, separate them with a . (e.g. details.event)"
        ),
    )
    parser.add_argument(
        "--truncateAt",
        "-truncateAt",
        "--truncate-at",
        dest="truncate_at",
        type=int,
        default=defaults.truncate_at,
        help="truncate string fields over this length, if they are listed in --truncate",
    )
    parser.add_argument(
        "--wait-time",
        type=int,
        default=defaults.wait_time,
        help="long polling wait time in seconds (0-20)",
    )
    parser.add_argument(
        "--max-messages",
        type=int,
        default=defaults.max_messages,
        help="maximum messages per receive call (1-10)",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=defaults.color,
        help="disable JSON syntax highlighting",
    )
    parser.add_argument("--region", default=defaults.aws_region, help="AWS region")
    parser.add_argument("--profile", default=defaults.aws_profile, help="AWS named profile")
    parser.add_argument(
        "--batches",
        type=int,
        default=None,
        help="stop after this many receive calls (default: poll forever)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[Config, TruncationSpec | None, argparse.Namespace]:
    """
    Parse CLI arguments on top of environment configuration.

    Exits with status 2 on invalid values.
    """
    parser = build_parser(config)
    args = parser.parse_args(argv)

    settings = dataclasses.replace(
        config,
        aws_region=args.region,
        aws_profile=args.profile,
        queue_name=args.queue,
        truncate=args.truncate,
        truncate_at=args.truncate_at,
        wait_time=args.wait_time,
        max_messages=args.max_messages,
        color=args.color,
    )

    try:
        settings.validate()
        truncation = TruncationSpec.from_csv(settings.truncate, limit=settings.truncate_at)
    except (ValueError, ValidationError) as e:
        parser.error(str(e))

    if args.batches is not None and args.batches <= 0:
        parser.error("--batches must be a positive integer")

    return settings, truncation, args


def create_container(settings: Config, truncation: TruncationSpec | None) -> DependenciesContainer:
    """Create the DI container for the given settings."""
    container = DependenciesContainer()
    container.settings.from_dict(
        {
            "aws_region": settings.aws_region,
            "aws_profile": settings.aws_profile,
            "list_limit": settings.list_limit,
            "color": settings.color,
            "truncation": truncation,
        }
    )
    return container


def run(
    settings: Config,
    container: DependenciesContainer,
    max_batches: int | None = None,
) -> None:
    """
    Resolve the queue, then poll it.

    Raises:
        BotoCoreError: If the AWS session or client cannot be created.
        QueueResolutionError: If the queue name does not match exactly one queue.
        QueueTransportError: If listing or receiving fails.
    """
    sqs_client = container.sqs_client()
    resolver = container.queue_resolver()

    queue_url = resolver.resolve(settings.queue_name)
    logger.info("Polling %s, press CTRL-C to exit", queue_url)

    run_poll_loop(
        sqs_client=sqs_client,
        queue_url=queue_url,
        renderer=container.renderer(),
        wait_time=settings.wait_time,
        max_messages=settings.max_messages,
        max_batches=max_batches,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    settings, truncation, args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        container = create_container(settings, truncation)
        run(settings, container, max_batches=args.batches)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except BotoCoreError as e:
        logger.error("Unable to load AWS SDK config: %s", e)
        sys.exit(1)
    except QueueResolutionError as e:
        logger.error("%s", e.message)
        sys.exit(1)
    except QueueTransportError as e:
        if e.operation == "ReceiveMessage":
            logger.error("Unable to poll: %s", e.cause)
        else:
            logger.error("Unable to find queue: %s", e.cause)
        sys.exit(1)


if __name__ == "__main__":
    main()
