from dataclasses import replace

from .base import Agent
from ..core.config import Strategy
from ..core.engine import GameEngine
from . import register_agent


@register_agent("optimal")
class OptimalAgent(Agent):
    """
    Plays the closed-form optimal move computed by the engine, using the engine's configured strategy.
    """
    def choose_move(self, engine):
        return engine.select_move()


class _StrategyAgent(Agent):
    """
    Optimal agent that uses its own tie-break rule instead of the engine's configured strategy.
    Works on a throwaway engine so the real game's configuration is never touched.
    """
    strategy = None

    def choose_move(self, engine):
        shadow = GameEngine(replace(engine.config, heaps=engine.heaps, strategy=self.strategy))
        return shadow.select_move()


@register_agent("optimal_smallest")
class SmallestOptimalAgent(_StrategyAgent):
    """Optimal play, removing as few objects as possible."""
    strategy = Strategy.SMALLEST


@register_agent("optimal_largest")
class LargestOptimalAgent(_StrategyAgent):
    """Optimal play, removing as many objects as possible."""
    strategy = Strategy.LARGEST
