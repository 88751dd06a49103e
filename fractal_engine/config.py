"""Process-wide engine settings."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .geometry import Frame


@dataclass
class EngineConfig:
    # Largest geometry a single frame may hold; checked when a run starts.
    element_budget: int = 2_000_000
    default_frame: Frame = Frame(400.0, 400.0)


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)
