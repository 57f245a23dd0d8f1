"""Document factories shared by the tests."""

from projectfu.checks import configure
from projectfu.state import (
    SYSTEM,
    Actor,
    Affinity,
    AffinityValue,
    CharacterData,
    ChatMessage,
    ChatSpeaker,
    Check,
    CheckDetails,
    DamageType,
    Flags,
    Resource,
    Resources,
)


def make_actor(name: str, hp: int = 50, **affinities: AffinityValue) -> Actor:
    """Character with full hp and the given affinities (phys=..., fire=...)."""
    return Actor(
        name=name,
        system=CharacterData(
            affinities={key: Affinity(current=value) for key, value in affinities.items()},
            resources=Resources(hp=Resource(value=hp, max=hp)),
        ),
    )


def make_damage_check(damage_type: DamageType, total: int, name: str = "Iron Sword") -> Check:
    """Check dealing `total` damage, as the host leaves it after rolling."""
    check = Check(details=CheckDetails(name=name))
    configure(check).set_damage(damage_type, total).modify_damage(
        lambda damage: damage.model_copy(update={"total": total})
    )
    return check


def make_damage_message(damage_type: DamageType, total: int, name: str = "Iron Sword") -> ChatMessage:
    """Chat message carrying a check that deals `total` damage."""
    message = ChatMessage(speaker=ChatSpeaker(alias="Ryn"))
    message.set_flag(SYSTEM, Flags.CHECK_V2, make_damage_check(damage_type, total, name))
    return message
