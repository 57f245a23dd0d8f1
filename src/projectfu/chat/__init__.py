"""Chat message interactions."""

from .apply_damage import (
    APPLY_DAMAGE_ACTION,
    ApplyDamageAction,
    DamageApplicationGuard,
    DamageResult,
    attach_damage_application_handler,
    handle_damage_application,
    register_chat_interaction,
)

__all__ = [
    "APPLY_DAMAGE_ACTION",
    "ApplyDamageAction",
    "DamageApplicationGuard",
    "DamageResult",
    "attach_damage_application_handler",
    "handle_damage_application",
    "register_chat_interaction",
]
