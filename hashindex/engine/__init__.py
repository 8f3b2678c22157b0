from .statistics import IndexStatistics
from .engine import HashIndexEngine, EngineState

__all__ = ["IndexStatistics", "HashIndexEngine", "EngineState"]
