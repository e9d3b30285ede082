from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


class Player:
    """Minimal participant handle. Owners are compared by identity only."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Player({self.name!r})"


@dataclass(eq=False)
class Territory:
    """A single board cell.

    ``columns`` is the only piece of board configuration a territory knows;
    it is needed to turn the row-major ``id`` back into ``(row, col)``.
    ``id`` and ``dice`` stay at ``-1`` until the board assigns them.
    """

    columns: int
    id: int = -1
    owner: Optional[Any] = None
    dice: int = -1
    playable: bool = True

    @property
    def row(self) -> int:
        return self.id // self.columns

    @property
    def col(self) -> int:
        return self.id % self.columns

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def is_owned_by(self, player: Any) -> bool:
        return self.owner is player
