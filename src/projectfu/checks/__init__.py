"""Check configuration and inspection."""

from .configuration import (
    CheckConfigurer,
    CheckInspector,
    configure,
    get_message_check,
    init_difficulty,
    init_hr_zero,
    inspect,
)

__all__ = [
    "CheckConfigurer",
    "CheckInspector",
    "configure",
    "get_message_check",
    "init_difficulty",
    "init_hr_zero",
    "inspect",
]
