"""
Pytest fixtures for projectfu tests.

Provides an isolated hook registry, an in-memory host and sample documents.
"""

import pytest
from pathlib import Path

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from projectfu.state import (
    Actor,
    AffinityValue,
    EventBus,
    MemoryHost,
    Token,
    TokenDisposition,
)
from helpers import make_actor


@pytest.fixture
def bus():
    """Fresh hook registry, isolated from the process-wide one."""
    return EventBus()


@pytest.fixture
def host(bus):
    """In-memory host using the fixture bus."""
    return MemoryHost(bus=bus)


@pytest.fixture
def resistant_actor():
    """Character resisting physical damage."""
    return make_actor("Kael", hp=60, phys=AffinityValue.RESISTANCE)


@pytest.fixture
def select(host):
    """Control tokens for the given actors."""
    def _select(*actors: Actor) -> None:
        host.controlled = [
            Token(name=actor.name, disposition=TokenDisposition.FRIENDLY, actor=actor)
            for actor in actors
        ]
    return _select
