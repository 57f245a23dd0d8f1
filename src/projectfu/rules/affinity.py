"""
Damage affinity rules as pure functions.

Each affinity maps to a damage transform and to the localization key of
the chat line describing the outcome. Both depend on the modifier keys
held when damage is applied: shift ignores resistance, shift+ctrl
ignores immunity.
"""

import logging
from typing import Callable

from ..state.schema import AFFINITY_LABELS, AffinityValue, ClickModifiers

logger = logging.getLogger(__name__)


DamageModifier = Callable[[int, ClickModifiers], int]
AffinityKey = Callable[[ClickModifiers], str]


AFFINITY_DAMAGE_MODIFIERS: dict[AffinityValue, DamageModifier] = {
    AffinityValue.VULNERABILITY: lambda damage, modifiers: damage * 2,
    AffinityValue.NONE: lambda damage, modifiers: damage,
    AffinityValue.RESISTANCE: lambda damage, modifiers: (
        damage if modifiers.shift else damage // 2
    ),
    AffinityValue.IMMUNITY: lambda damage, modifiers: (
        damage if modifiers.shift and modifiers.ctrl else 0
    ),
    AffinityValue.ABSORPTION: lambda damage, modifiers: -damage,
}

AFFINITY_KEYS: dict[AffinityValue, AffinityKey] = {
    AffinityValue.VULNERABILITY: lambda modifiers: "FU.ChatApplyDamageVulnerable",
    AffinityValue.NONE: lambda modifiers: "FU.ChatApplyDamageNormal",
    AffinityValue.RESISTANCE: lambda modifiers: (
        "FU.ChatApplyDamageResistantIgnored" if modifiers.shift else "FU.ChatApplyDamageResistant"
    ),
    AffinityValue.IMMUNITY: lambda modifiers: (
        "FU.ChatApplyDamageImmuneIgnored" if modifiers.shift and modifiers.ctrl else "FU.ChatApplyDamageImmune"
    ),
    AffinityValue.ABSORPTION: lambda modifiers: "FU.ChatApplyDamageAbsorb",
}


def normalize_affinity(affinity: AffinityValue | int) -> AffinityValue:
    """
    Coerce a stored affinity value, treating unknown values as NONE.
    """
    try:
        return AffinityValue(affinity)
    except ValueError:
        logger.warning(f"Unknown affinity value {affinity!r}, treating as none")
        return AffinityValue.NONE


def apply_affinity(
    affinity: AffinityValue | int, damage: int, modifiers: ClickModifiers
) -> int:
    """
    Transform a damage amount by an affinity.

    Args:
        affinity: The target's affinity against the damage type
        damage: Incoming damage amount
        modifiers: Modifier keys held when applying

    Returns:
        The transformed amount
    """
    return AFFINITY_DAMAGE_MODIFIERS[normalize_affinity(affinity)](damage, modifiers)


def affinity_message_key(affinity: AffinityValue | int, modifiers: ClickModifiers) -> str:
    """Localization key describing how an affinity treated the damage."""
    return AFFINITY_KEYS[normalize_affinity(affinity)](modifiers)


def affinity_label(affinity: AffinityValue | int) -> str:
    """Localization key naming the affinity itself."""
    return AFFINITY_LABELS[normalize_affinity(affinity)]


def resolve_damage_delta(
    affinity: AffinityValue | int, total: int, modifiers: ClickModifiers
) -> int:
    """
    Resource delta for taking `total` damage.

    Negative values reduce the resource; absorption yields a positive
    delta (healing).
    """
    return -apply_affinity(affinity, total, modifiers)
