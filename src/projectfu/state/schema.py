"""
Pydantic models for projectfu documents.

The host owns these documents; the models mirror the fields the rules
layer reads and writes. Serialized names follow the host's camelCase.
"""

from enum import Enum, IntEnum
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


SYSTEM = "projectfu"


def generate_id() -> str:
    return str(uuid4())[:8]


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class AffinityValue(IntEnum):
    VULNERABILITY = -1
    NONE = 0
    RESISTANCE = 1
    IMMUNITY = 2
    ABSORPTION = 3


AFFINITY_LABELS: dict[AffinityValue, str] = {
    AffinityValue.VULNERABILITY: "FU.AffinityVulnerability",
    AffinityValue.NONE: "FU.AffinityNormal",
    AffinityValue.RESISTANCE: "FU.AffinityResistance",
    AffinityValue.IMMUNITY: "FU.AffinityImmunity",
    AffinityValue.ABSORPTION: "FU.AffinityAbsorption",
}


class DamageType(str, Enum):
    PHYSICAL = "physical"
    AIR = "air"
    BOLT = "bolt"
    DARK = "dark"
    EARTH = "earth"
    FIRE = "fire"
    ICE = "ice"
    LIGHT = "light"
    POISON = "poison"
    UNTYPED = "untyped"

    @property
    def affinity_key(self) -> str:
        """Key of this damage type in an actor's affinities."""
        return "phys" if self is DamageType.PHYSICAL else self.value

    @property
    def label(self) -> str:
        return f"FU.Damage{self.value.capitalize()}"


class Defense(str, Enum):
    DEFENSE = "def"
    MAGIC_DEFENSE = "mdef"


class TokenDisposition(IntEnum):
    SECRET = -2
    HOSTILE = -1
    NEUTRAL = 0
    FRIENDLY = 1


class Faction(str, Enum):
    FRIENDLY = "friendly"
    HOSTILE = "hostile"


class NpcRankValue(str, Enum):
    SOLDIER = "soldier"
    ELITE = "elite"
    CHAMPION = "champion"


class Flags:
    """Flag keys stored under the system scope on host documents."""

    CHECK_V2 = "checkV2"


# -----------------------------------------------------------------------------
# Check data
# -----------------------------------------------------------------------------

class HostModel(BaseModel):
    """Base for records exchanged with the host in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BonusDamage(HostModel):
    label: str
    value: int


class DamageData(HostModel):
    type: DamageType
    modifiers: list[BonusDamage] = Field(default_factory=list)
    modifier_total: int | None = None
    total: int | None = None


class TargetData(HostModel):
    name: str
    uuid: str
    link: str = ""
    difficulty: int = 0


class CheckAdditionalData(HostModel):
    """
    Typed view of the data a check carries for this system.

    A field is absent until assigned; `model_fields_set` tells absent
    apart from an explicit value. Keys owned by other modules pass through.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        validate_assignment=True,
    )

    damage: DamageData | None = None
    hr_zero: bool | None = None
    targeted_defense: Defense | None = None
    difficulty: int | None = None
    targets: list[TargetData] | None = None


class CheckDetails(HostModel):
    name: str = ""


class Check(HostModel):
    """A dice check resolved by the host."""
    id: str = Field(default_factory=generate_id)
    details: CheckDetails = Field(default_factory=CheckDetails)
    additional_data: CheckAdditionalData = Field(default_factory=CheckAdditionalData)


class ClickModifiers(BaseModel):
    """Modifier keys held while clicking a chat action."""

    model_config = ConfigDict(frozen=True)

    alt: bool = False
    ctrl: bool = False
    shift: bool = False


# -----------------------------------------------------------------------------
# Actors and tokens
# -----------------------------------------------------------------------------

class Affinity(HostModel):
    base: AffinityValue = AffinityValue.NONE
    current: AffinityValue = AffinityValue.NONE


class Resource(HostModel):
    value: int = 0
    max: int = 0


class Resources(HostModel):
    hp: Resource = Field(default_factory=Resource)
    mp: Resource = Field(default_factory=Resource)
    ip: Resource = Field(default_factory=Resource)


class NpcRank(HostModel):
    value: NpcRankValue = NpcRankValue.SOLDIER
    replaced_soldiers: int = Field(default=1, ge=0, le=6)

    @model_validator(mode="after")
    def _check_champion_soldiers(self) -> "NpcRank":
        # Only champions read the stored count
        if self.value == NpcRankValue.CHAMPION and self.replaced_soldiers < 1:
            raise ValueError("A champion replaces between 1 and 6 soldiers")
        return self

    @property
    def turns(self) -> int:
        """Soldiers replaced: 1 for a soldier, 2 for an elite, configured for a champion."""
        if self.value == NpcRankValue.SOLDIER:
            return 1
        if self.value == NpcRankValue.ELITE:
            return 2
        return self.replaced_soldiers


class CharacterData(HostModel):
    type: Literal["character"] = "character"
    affinities: dict[str, Affinity] = Field(default_factory=dict)
    resources: Resources = Field(default_factory=Resources)


class NpcData(HostModel):
    type: Literal["npc"] = "npc"
    affinities: dict[str, Affinity] = Field(default_factory=dict)
    resources: Resources = Field(default_factory=Resources)
    rank: NpcRank = Field(default_factory=NpcRank)


class Actor(HostModel):
    id: str = Field(default_factory=generate_id)
    name: str
    system: CharacterData | NpcData = Field(
        default_factory=CharacterData, discriminator="type"
    )

    def get_affinity(self, damage_type: DamageType) -> AffinityValue:
        """Current affinity against a damage type, NONE when unlisted."""
        affinity = self.system.affinities.get(damage_type.affinity_key)
        if affinity is None:
            return AffinityValue.NONE
        return affinity.current


class Token(HostModel):
    id: str = Field(default_factory=generate_id)
    name: str = ""
    disposition: TokenDisposition = TokenDisposition.HOSTILE
    actor: Actor | None = None


class Combatant(HostModel):
    """A combat participant with turn-order data derived from its token."""
    id: str = Field(default_factory=generate_id)
    actor_id: str | None = None
    token: Token | None = None

    @property
    def faction(self) -> Faction:
        if self.token is not None and self.token.disposition == TokenDisposition.FRIENDLY:
            return Faction.FRIENDLY
        return Faction.HOSTILE

    @property
    def total_turns(self) -> int:
        """Turns per round: champions act once per soldier they replace."""
        if self.token is not None and self.token.actor is not None:
            system = self.token.actor.system
            if isinstance(system, NpcData):
                return system.rank.turns
        return 1


# -----------------------------------------------------------------------------
# Chat
# -----------------------------------------------------------------------------

class ChatSpeaker(HostModel):
    alias: str = ""
    actor: str | None = None
    token: str | None = None


class ChatMessage(HostModel):
    id: str = Field(default_factory=generate_id)
    speaker: ChatSpeaker = Field(default_factory=ChatSpeaker)
    flavor: str = ""
    content: str = ""
    flags: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def get_flag(self, scope: str, key: str) -> Any:
        return self.flags.get(scope, {}).get(key)

    def set_flag(self, scope: str, key: str, value: Any) -> None:
        self.flags.setdefault(scope, {})[key] = value
