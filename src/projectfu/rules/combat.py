"""
Combat hook handlers.

Faction and turn count live on Combatant as derived properties; this
module guards combatant creation.
"""

import logging
from typing import Callable

from ..state.event_bus import EventBus, EventType, GameEvent
from ..state.host import HostGateway
from ..state.schema import Combatant

logger = logging.getLogger(__name__)


TOKEN_WITHOUT_ACTOR = "FU.CombatTokenWithoutActor"


def pre_create_combatant(host: HostGateway) -> Callable[[GameEvent], bool | None]:
    """
    preCreateCombatant handler vetoing combatants without an actor.
    """
    def handler(event: GameEvent) -> bool | None:
        document = event.data.get("document")
        if isinstance(document, Combatant) and document.actor_id is None:
            logger.debug(f"Rejecting combatant {document.id}: no actor")
            host.notify("info", TOKEN_WITHOUT_ACTOR)
            return False
        return None

    return handler


def register_combat_hooks(bus: EventBus, host: HostGateway) -> None:
    bus.on(EventType.PRE_CREATE_COMBATANT, pre_create_combatant(host))
