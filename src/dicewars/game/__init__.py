from .board import Board
from .graph import AdjacencyGraph
from .strategy import AttackAdvisor, AttackCandidate, Strategy
from .territory import Player, Territory

__all__ = [
    "AdjacencyGraph",
    "AttackAdvisor",
    "AttackCandidate",
    "Board",
    "Player",
    "Strategy",
    "Territory",
]
