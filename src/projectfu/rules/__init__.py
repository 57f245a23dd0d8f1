"""
Game rules as pure functions.

Separates logic from data models for easier testing.
"""

from .affinity import (
    affinity_label,
    affinity_message_key,
    apply_affinity,
    normalize_affinity,
    resolve_damage_delta,
)
from .combat import pre_create_combatant, register_combat_hooks

__all__ = [
    "affinity_label",
    "affinity_message_key",
    "apply_affinity",
    "normalize_affinity",
    "resolve_damage_delta",
    "pre_create_combatant",
    "register_combat_hooks",
]
