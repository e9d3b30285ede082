from __future__ import annotations

from dataclasses import dataclass

from dicewars.errors import InvalidConfigurationError

# Every territory starts with one die and the per-player budget is three dice
# per territory, so a cap below three can never absorb the whole budget.
STARTING_DICE_PER_TERRITORY = 3
MIN_MAX_DICE = STARTING_DICE_PER_TERRITORY


@dataclass(frozen=True)
class BoardConfig:
    rows: int = 8
    columns: int = 8
    victims: int = 6
    max_dice: int = 8
    seed: int | None = None

    @property
    def num_territories(self) -> int:
        return self.rows * self.columns

    def validate(self, num_players: int) -> None:
        validate_board_parameters(
            num_players, self.rows, self.columns, self.victims, self.max_dice
        )


def validate_board_parameters(
    num_players: int, rows: int, columns: int, victims: int, max_dice: int
) -> None:
    if num_players < 1:
        raise InvalidConfigurationError("At least one player is required.")
    if rows < 1:
        raise InvalidConfigurationError(f"Board needs at least 1 row, got {rows}.")
    if columns < 1:
        raise InvalidConfigurationError(
            f"Board needs at least 1 column, got {columns}."
        )
    if victims < 0:
        raise InvalidConfigurationError(f"Victim count must be >= 0, got {victims}.")
    if victims > rows * columns:
        raise InvalidConfigurationError(
            f"Victim count {victims} exceeds the {rows * columns} cells on the board."
        )
    if max_dice < MIN_MAX_DICE:
        raise InvalidConfigurationError(
            f"max_dice must be >= {MIN_MAX_DICE} to hold the starting dice budget, "
            f"got {max_dice}."
        )
