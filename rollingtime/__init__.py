"""Rolling time window statistics over timestamped cost series."""

from .window import Observation, RollingWindow

__all__ = ["Observation", "RollingWindow"]
