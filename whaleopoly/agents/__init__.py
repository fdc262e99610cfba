from whaleopoly.agents.base import Agent
from whaleopoly.agents.greedy import GreedyAgent
from whaleopoly.agents.random import RandomAgent

__all__ = ["Agent", "GreedyAgent", "RandomAgent"]
