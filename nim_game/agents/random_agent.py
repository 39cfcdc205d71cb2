from .base import Agent
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Simulates an unskilled player: every turn it removes a random number of objects from a random non-empty heap.
    The agent's own rng is used, so a seeded rng gives a reproducible game.
    """
    def choose_move(self, engine):
        return engine.select_random_move(self.rng)
