"""
Host application interface.

The virtual tabletop owns documents, notifications, rendering and
persistence. The system reaches it only through HostGateway.

Implementations:
- MemoryHost: in-memory host (testing and embedding)
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

from ..config import Settings, get_translations
from .event_bus import EventBus, EventType, get_event_bus
from .schema import Actor, ChatMessage, ChatSpeaker, Combatant, Resource, Token
from .templates import TemplateEngine, create_template_engine

logger = logging.getLogger(__name__)


# Chat actions attached while rendering a message, keyed by action name
ChatAction = Callable[..., Awaitable[Any]]


@runtime_checkable
class HostGateway(Protocol):
    """Operations the system consumes from the host."""

    def controlled_actors(self) -> list[Actor]:
        """Actors of the tokens the current user controls."""
        ...

    def user_character(self) -> Actor | None:
        """Character bound to the current user, if any."""
        ...

    def notify(self, level: str, key: str) -> None:
        """Show a localized notification (level: info, warn, error)."""
        ...

    def localize(self, key: str) -> str:
        ...

    def render_template(self, name: str, context: dict[str, Any]) -> str:
        ...

    async def modify_token_attribute(
        self, actor: Actor, attribute: str, value: int, is_delta: bool = True
    ) -> Actor:
        """Change a numeric or bar attribute of an actor."""
        ...

    async def create_chat_message(
        self, speaker: ChatSpeaker, flavor: str, content: str
    ) -> ChatMessage:
        ...


@dataclass
class Notification:
    level: str
    key: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class AttributeUpdate:
    """A recorded modify_token_attribute call."""
    actor_id: str
    attribute: str
    value: int
    is_delta: bool
    before: int
    after: int


class MemoryHost:
    """
    In-memory host for tests and embedding.

    Records every notification, attribute update and chat message so
    callers can assert on side effects.
    """

    def __init__(
        self,
        bus: EventBus | None = None,
        translations: dict[str, str] | None = None,
        templates: TemplateEngine | None = None,
    ):
        self.bus = bus or get_event_bus()
        self.translations = translations if translations is not None else get_translations("en")
        self.templates = templates or TemplateEngine(localize=self.localize)

        self.controlled: list[Token] = []
        self.character: Actor | None = None

        self.notifications: list[Notification] = []
        self.updates: list[AttributeUpdate] = []
        self.messages: list[ChatMessage] = []
        self.combatants: list[Combatant] = []

    @classmethod
    def from_settings(cls, settings: Settings, bus: EventBus | None = None) -> "MemoryHost":
        """Host using the configured language and template overrides."""
        host = cls(bus=bus, translations=get_translations(settings.get("language", "en")))
        host.templates = create_template_engine(settings.get("templates_dir"), host.localize)
        return host

    # -------------------------------------------------------------------------
    # HostGateway
    # -------------------------------------------------------------------------

    def controlled_actors(self) -> list[Actor]:
        return [token.actor for token in self.controlled if token.actor is not None]

    def user_character(self) -> Actor | None:
        return self.character

    def notify(self, level: str, key: str) -> None:
        message = self.localize(key)
        self.notifications.append(Notification(level=level, key=key, message=message))
        logger.info(f"[{level}] {message}")

    def localize(self, key: str) -> str:
        return self.translations.get(key, key)

    def render_template(self, name: str, context: dict[str, Any]) -> str:
        return self.templates.render(name, context)

    async def modify_token_attribute(
        self, actor: Actor, attribute: str, value: int, is_delta: bool = True
    ) -> Actor:
        *parents, leaf = attribute.split(".")
        target: Any = actor.system
        for part in parents:
            target = getattr(target, part)
        current = getattr(target, leaf)

        if isinstance(current, Resource):
            before = current.value
            after = before + value if is_delta else value
            current.value = max(0, min(current.max, after))
            after = current.value
        else:
            before = current
            after = before + value if is_delta else value
            setattr(target, leaf, after)

        self.updates.append(AttributeUpdate(
            actor_id=actor.id,
            attribute=attribute,
            value=value,
            is_delta=is_delta,
            before=before,
            after=after,
        ))
        await asyncio.sleep(0)
        return actor

    async def create_chat_message(
        self, speaker: ChatSpeaker, flavor: str, content: str
    ) -> ChatMessage:
        message = ChatMessage(speaker=speaker, flavor=flavor, content=content)
        self.messages.append(message)
        await asyncio.sleep(0)
        return message

    # -------------------------------------------------------------------------
    # Document lifecycle
    # -------------------------------------------------------------------------

    def create_combatant(self, combatant: Combatant) -> Combatant | None:
        """Create a combatant unless a preCreateCombatant handler vetoes it."""
        if not self.bus.call(EventType.PRE_CREATE_COMBATANT, document=combatant):
            return None
        self.combatants.append(combatant)
        return combatant

    def render_chat_message(self, message: ChatMessage) -> dict[str, ChatAction]:
        """
        Fire renderChatMessage and return the actions handlers attached.
        """
        actions: dict[str, ChatAction] = {}
        self.bus.emit(EventType.RENDER_CHAT_MESSAGE, message=message, actions=actions)
        return actions
