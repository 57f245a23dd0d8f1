"""
System bootstrap.

Wires hook handlers and class features into a host at startup.

Usage:
    settings = load_settings(data_dir)
    setup_logging(settings["log_level"])
    context = init_system(MemoryHost(), settings=settings)
"""

import logging
from dataclasses import dataclass

from .chat.apply_damage import register_chat_interaction
from .config import DEFAULT_SETTINGS, Settings
from .features import ClassFeatureRegistry, register_class_features
from .rules.combat import register_combat_hooks
from .state.event_bus import EventBus, get_event_bus
from .state.host import HostGateway
from .state.schema import SYSTEM

logger = logging.getLogger(__name__)


@dataclass
class SystemContext:
    """What init_system wired up."""
    host: HostGateway
    bus: EventBus
    registry: ClassFeatureRegistry
    settings: Settings


def _parse_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for applications embedding the system."""
    logging.basicConfig(
        level=_parse_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def init_system(
    host: HostGateway,
    bus: EventBus | None = None,
    registry: ClassFeatureRegistry | None = None,
    settings: Settings | None = None,
) -> SystemContext:
    """
    Register the system's hooks and class features.

    The `log_level` setting applies to the package's loggers; handlers
    are left to setup_logging or the embedding application.

    Args:
        host: Host the hook handlers act on
        bus: Hook registry (defaults to the process-wide one)
        registry: Class feature registry (a new one if omitted)
        settings: System settings (defaults if omitted)
    """
    bus = bus or get_event_bus()
    registry = registry if registry is not None else ClassFeatureRegistry()
    merged: Settings = DEFAULT_SETTINGS.copy()
    merged.update(settings or {})
    logging.getLogger(__package__).setLevel(_parse_level(merged["log_level"]))

    register_combat_hooks(bus, host)
    register_chat_interaction(bus, host, hp_attribute=merged["hp_attribute"])
    register_class_features(registry)

    logger.info(f"{SYSTEM} initialized with {len(registry)} class features")
    return SystemContext(host=host, bus=bus, registry=registry, settings=merged)
