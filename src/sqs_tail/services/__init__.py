from .envelope import decode
from .queue_resolver import QueueResolver
from .renderer import Renderer
from .truncator import format_truncated, truncate, truncate_field

__all__ = [
    "decode",
    "QueueResolver",
    "Renderer",
    "format_truncated",
    "truncate",
    "truncate_field",
]
