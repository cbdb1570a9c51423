"""Configuration package (Facade).

This package acts as a small *Facade* over the underlying configuration modules.
Callers import the public config types from a single, stable path:

	from minikine.services.config import Settings

instead of depending on which module defines each type.
"""

from minikine.services.config.emulator_config import EmulatorKind
from minikine.services.config.resources_config import StreamSpec, TableSpec
from minikine.services.config.settings import Settings

__all__ = ["EmulatorKind", "Settings", "StreamSpec", "TableSpec"]
