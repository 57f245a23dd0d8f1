"""
Applying check damage from chat messages.

Rendering a chat message whose check deals damage attaches an
"applyDamage" action. Invoking it applies the damage to the selected
actors (or the user's character), adjusted by each actor's affinity, and
posts one chat line per actor.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from ..checks.configuration import get_message_check, inspect
from ..rules.affinity import affinity_label, affinity_message_key, resolve_damage_delta
from ..state.event_bus import EventBus, EventType, GameEvent
from ..state.host import HostGateway
from ..state.schema import Actor, AffinityValue, ChatMessage, Check, ClickModifiers
from ..state.templates import APPLY_DAMAGE_TEMPLATE

logger = logging.getLogger(__name__)

T = TypeVar("T")


APPLY_DAMAGE_ACTION = "applyDamage"
NO_ACTORS_SELECTED = "FU.ChatApplyDamageNoActorsSelected"
DEFAULT_HP_ATTRIBUTE = "resources.hp"


@dataclass
class DamageResult:
    """Outcome of applying damage to one actor."""
    actor: Actor
    affinity: AffinityValue
    delta: int  # Signed resource change, positive when absorbed
    message: ChatMessage


class DamageApplicationGuard:
    """
    Allows one damage application in flight at a time.

    A run() while another is pending is dropped and returns None. The
    guard releases when the operation finishes, whether it succeeded or
    raised.
    """

    def __init__(self):
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T | None:
        if self._in_flight:
            logger.debug("Damage application already in progress, ignoring click")
            return None
        self._in_flight = True
        try:
            return await operation()
        finally:
            self._in_flight = False


async def handle_damage_application(
    host: HostGateway,
    message: ChatMessage,
    check: Check,
    modifiers: ClickModifiers,
    hp_attribute: str = DEFAULT_HP_ATTRIBUTE,
    bus: EventBus | None = None,
) -> list[DamageResult] | None:
    """
    Apply a check's damage to the targeted actors.

    Targets are the actors of controlled tokens, or the user's character
    when nothing is selected. Without either, an error notification is
    shown and nothing changes.

    All actors are updated concurrently. The first failing host call
    propagates to the caller.

    Returns:
        One DamageResult per actor, or None if no actor was available

    Raises:
        ValueError: If the check carries no damage
    """
    damage = inspect(check).get_damage()
    if damage is None:
        raise ValueError(f"Check {check.id} has no damage to apply")

    actors = host.controlled_actors()
    if not actors:
        character = host.user_character()
        if character is None:
            host.notify("error", NO_ACTORS_SELECTED)
            return None
        actors = [character]

    total = damage.total or 0
    source = check.details.name
    damage_label = host.localize(damage.type.label)

    async def apply_to(actor: Actor) -> DamageResult:
        affinity = actor.get_affinity(damage.type)
        delta = resolve_damage_delta(affinity, total, modifiers)
        content = host.render_template(APPLY_DAMAGE_TEMPLATE, {
            "message": affinity_message_key(affinity, modifiers),
            "actor": actor.name,
            "damage": abs(delta),
            "type": damage_label,
            "from": source,
        })
        _, chat_message = await asyncio.gather(
            host.modify_token_attribute(actor, hp_attribute, delta, True),
            host.create_chat_message(
                speaker=message.speaker,
                flavor=host.localize(affinity_label(affinity)),
                content=content,
            ),
        )
        logger.debug(f"{actor.name}: {hp_attribute} {delta:+d} ({affinity.name.lower()})")
        return DamageResult(actor=actor, affinity=affinity, delta=delta, message=chat_message)

    results = list(await asyncio.gather(*(apply_to(actor) for actor in actors)))

    if bus is not None:
        bus.emit(EventType.DAMAGE_APPLIED, message=message, check=check, results=results)
    return results


class ApplyDamageAction:
    """
    The applyDamage action attached to one rendered chat message.

    Owns its own guard, so overlapping clicks on the same message are
    dropped while clicks on other messages proceed.
    """

    def __init__(
        self,
        host: HostGateway,
        message: ChatMessage,
        check: Check,
        hp_attribute: str = DEFAULT_HP_ATTRIBUTE,
        bus: EventBus | None = None,
    ):
        self.host = host
        self.message = message
        self.check = check
        self.hp_attribute = hp_attribute
        self.bus = bus
        self.guard = DamageApplicationGuard()

    async def __call__(self, modifiers: ClickModifiers | None = None) -> list[DamageResult] | None:
        modifiers = modifiers or ClickModifiers()
        return await self.guard.run(lambda: handle_damage_application(
            self.host,
            self.message,
            self.check,
            modifiers,
            hp_attribute=self.hp_attribute,
            bus=self.bus,
        ))


def attach_damage_application_handler(
    host: HostGateway,
    hp_attribute: str = DEFAULT_HP_ATTRIBUTE,
    bus: EventBus | None = None,
) -> Callable[[GameEvent], None]:
    """
    renderChatMessage handler attaching applyDamage to damaging checks.

    The hook receives `message` and an `actions` dict to fill.
    """
    def handler(event: GameEvent) -> None:
        message = event.data.get("message")
        actions = event.data.get("actions")
        if not isinstance(message, ChatMessage) or actions is None:
            return
        check = get_message_check(message)
        if check is None or inspect(check).get_damage() is None:
            return
        actions[APPLY_DAMAGE_ACTION] = ApplyDamageAction(
            host, message, check, hp_attribute=hp_attribute, bus=bus
        )

    return handler


def register_chat_interaction(
    bus: EventBus, host: HostGateway, hp_attribute: str = DEFAULT_HP_ATTRIBUTE
) -> None:
    bus.on(
        EventType.RENDER_CHAT_MESSAGE,
        attach_damage_application_handler(host, hp_attribute=hp_attribute, bus=bus),
    )
