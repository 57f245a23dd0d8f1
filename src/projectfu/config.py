"""
System settings persistence and localization strings.

Settings are stored in a JSON file next to the world data; missing keys
fall back to DEFAULT_SETTINGS.
"""

import json
import logging
from pathlib import Path
from typing import TypedDict

logger = logging.getLogger(__name__)


class Settings(TypedDict, total=False):
    """System settings."""
    log_level: str  # DEBUG, INFO, WARNING, ...
    templates_dir: str | None  # Overrides for built-in chat templates
    hp_attribute: str  # Token attribute damage is applied to
    language: str  # Key into TRANSLATIONS


DEFAULT_SETTINGS: Settings = {
    "log_level": "INFO",
    "templates_dir": None,
    "hp_attribute": "resources.hp",
    "language": "en",
}


TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "FU.BaseDamage": "Base Damage",
        "FU.AffinityVulnerability": "Vulnerability",
        "FU.AffinityNormal": "Normal",
        "FU.AffinityResistance": "Resistance",
        "FU.AffinityImmunity": "Immunity",
        "FU.AffinityAbsorption": "Absorption",
        "FU.DamagePhysical": "physical",
        "FU.DamageAir": "air",
        "FU.DamageBolt": "bolt",
        "FU.DamageDark": "dark",
        "FU.DamageEarth": "earth",
        "FU.DamageFire": "fire",
        "FU.DamageIce": "ice",
        "FU.DamageLight": "light",
        "FU.DamagePoison": "poison",
        "FU.DamageUntyped": "untyped",
        "FU.ChatApplyDamageVulnerable": "{actor} is vulnerable and takes {damage} {type} damage from {from}.",
        "FU.ChatApplyDamageNormal": "{actor} takes {damage} {type} damage from {from}.",
        "FU.ChatApplyDamageResistant": "{actor} resists and takes {damage} {type} damage from {from}.",
        "FU.ChatApplyDamageResistantIgnored": "{actor} takes {damage} {type} damage from {from}, ignoring resistance.",
        "FU.ChatApplyDamageImmune": "{actor} is immune to {type} damage from {from}.",
        "FU.ChatApplyDamageImmuneIgnored": "{actor} takes {damage} {type} damage from {from}, ignoring immunity.",
        "FU.ChatApplyDamageAbsorb": "{actor} absorbs {damage} {type} damage from {from}.",
        "FU.ChatApplyDamageNoActorsSelected": "Select at least one token to apply damage to.",
        "FU.CombatTokenWithoutActor": "Tokens without an actor cannot join combat.",
    },
}


def get_settings_path(data_dir: Path | str = ".") -> Path:
    """Get path to the settings file."""
    return Path(data_dir) / ".projectfu_settings.json"


def load_settings(data_dir: Path | str = ".") -> Settings:
    """Load settings from file, or return defaults if not found."""
    path = get_settings_path(data_dir)

    if not path.exists():
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
        settings = DEFAULT_SETTINGS.copy()
        settings.update(saved)
        return settings
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Settings, data_dir: Path | str = ".") -> bool:
    """Save settings to file. Returns True on success."""
    path = get_settings_path(data_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
        return True
    except IOError as e:
        logger.error(f"Could not save settings to {path}: {e}")
        return False


def get_translations(language: str) -> dict[str, str]:
    """Strings for a language, falling back to English."""
    return TRANSLATIONS.get(language, TRANSLATIONS["en"])
