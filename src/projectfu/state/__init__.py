"""Document models, hooks and host access for projectfu."""

from .schema import (
    SYSTEM,
    Actor,
    Affinity,
    AffinityValue,
    BonusDamage,
    CharacterData,
    ChatMessage,
    ChatSpeaker,
    Check,
    CheckAdditionalData,
    CheckDetails,
    ClickModifiers,
    Combatant,
    DamageData,
    DamageType,
    Defense,
    Faction,
    Flags,
    NpcData,
    NpcRank,
    NpcRankValue,
    Resource,
    Resources,
    TargetData,
    Token,
    TokenDisposition,
)
from .event_bus import (
    EventBus,
    EventType,
    GameEvent,
    get_event_bus,
    reset_event_bus,
)
from .host import HostGateway, MemoryHost, Notification, AttributeUpdate
from .templates import TemplateEngine, create_template_engine, APPLY_DAMAGE_TEMPLATE

__all__ = [
    # Schema
    "SYSTEM",
    "Actor",
    "Affinity",
    "AffinityValue",
    "BonusDamage",
    "CharacterData",
    "ChatMessage",
    "ChatSpeaker",
    "Check",
    "CheckAdditionalData",
    "CheckDetails",
    "ClickModifiers",
    "Combatant",
    "DamageData",
    "DamageType",
    "Defense",
    "Faction",
    "Flags",
    "NpcData",
    "NpcRank",
    "NpcRankValue",
    "Resource",
    "Resources",
    "TargetData",
    "Token",
    "TokenDisposition",
    # Hooks
    "EventBus",
    "EventType",
    "GameEvent",
    "get_event_bus",
    "reset_event_bus",
    # Host
    "HostGateway",
    "MemoryHost",
    "Notification",
    "AttributeUpdate",
    # Templates
    "TemplateEngine",
    "create_template_engine",
    "APPLY_DAMAGE_TEMPLATE",
]
