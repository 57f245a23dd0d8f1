"""projectfu: rules for the Fabula Ultima tabletop game on a virtual tabletop host."""

from .system import SystemContext, init_system, setup_logging

__all__ = ["SystemContext", "init_system", "setup_logging"]

__version__ = "0.1.0"
