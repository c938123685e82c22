import json
import logging
from typing import Optional
from pydantic import BaseModel, field_validator

from .board import BLACK, WHITE
from .search import StrategyKind

LOGGER = logging.getLogger(__name__)

class EngineConfig(BaseModel):
    size: int = 8
    strategy: StrategyKind = StrategyKind.MINIMAX
    max_depth: int = 3
    human_color: int = BLACK
    seed: Optional[int] = None
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("size")
    @classmethod
    def _check_size(cls, value: int) -> int:
        if value < 2 or value % 2:
            raise ValueError("size must be an even number >= 2")
        return value

    @field_validator("max_depth")
    @classmethod
    def _check_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_depth must be positive")
        return value

    @field_validator("human_color")
    @classmethod
    def _check_color(cls, value: int) -> int:
        if value not in (BLACK, WHITE):
            raise ValueError("human_color must be 1 (Black) or -1 (White)")
        return value

def load_config(config_file: str = "reversi.json") -> EngineConfig:
    """Load engine settings from file or use defaults"""
    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        LOGGER.info("No config file at %s, using defaults", config_file)
        return EngineConfig()
    return EngineConfig(**data)
