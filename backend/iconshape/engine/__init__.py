"""Icon normalization and style adaptation engine."""

from iconshape.engine.config import DEFAULT_CONFIG, EngineConfig

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
]
