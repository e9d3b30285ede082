from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from .board import Board
from .rules import can_attack
from .territory import Territory

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """Turn decision interface shared by computer and human players.

    A decision point is ``evaluate(board)`` followed, if it returned True, by
    ``choose_attacker()`` and then ``choose_defender()``.
    """

    def __init__(self, player: Any = None) -> None:
        self.player = player

    @abstractmethod
    def evaluate(self, board: Board) -> bool:
        """Inspect ``board`` and report whether this player wants to attack."""

    @abstractmethod
    def choose_attacker(self) -> Optional[Territory]:
        ...

    @abstractmethod
    def choose_defender(self) -> Optional[Territory]:
        ...


@dataclass(frozen=True)
class AttackCandidate:
    attacker: Territory
    defender: Territory


class AttackAdvisor(Strategy):
    """Computer opponent: attack from any cell at least as strong as its target.

    Candidates are recomputed on every ``evaluate`` call; nothing is cached
    across ownership changes.
    """

    def __init__(self, player: Any = None, *, rng: np.random.Generator | None = None) -> None:
        super().__init__(player)
        self.rng = rng if rng is not None else np.random.default_rng()
        self._candidates: List[AttackCandidate] = []
        self._attacker: Optional[Territory] = None

    @property
    def candidates(self) -> Tuple[AttackCandidate, ...]:
        return tuple(self._candidates)

    @property
    def has_candidates(self) -> bool:
        return bool(self._candidates)

    def evaluate(self, board: Board) -> bool:
        if self.player is None:
            raise RuntimeError("Assign a player before evaluating the board.")
        self._attacker = None
        self._candidates = [
            AttackCandidate(attacker, defender)
            for attacker in board.territories_owned_by(self.player)
            for defender in board.enemy_neighbors_of(attacker)
            if can_attack(attacker, defender)
        ]
        logger.debug("%r has %d attack candidates", self.player, len(self._candidates))
        return self.has_candidates

    def choose_attacker(self) -> Optional[Territory]:
        if not self._candidates:
            return None
        index = int(self.rng.integers(len(self._candidates)))
        self._attacker = self._candidates[index].attacker
        logger.debug("%r attacks from cell %d", self.player, self._attacker.id)
        return self._attacker

    def choose_defender(self) -> Optional[Territory]:
        if self._attacker is None:
            return None
        for candidate in self._candidates:
            if candidate.attacker is self._attacker:
                return candidate.defender
        return None
