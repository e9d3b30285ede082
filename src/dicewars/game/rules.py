from __future__ import annotations

from dicewars.config import STARTING_DICE_PER_TERRITORY

from .territory import Territory

MIN_ATTACK_DICE = 2


def is_enemy(territory: Territory, other: Territory) -> bool:
    return territory.owner is not other.owner


def can_attack(attacker: Territory, defender: Territory) -> bool:
    # Favorable-or-tied heuristic, not a majority rule.
    return (
        is_enemy(attacker, defender)
        and attacker.dice >= MIN_ATTACK_DICE
        and attacker.dice >= defender.dice
    )


def dice_budget(territory_count: int) -> int:
    return STARTING_DICE_PER_TERRITORY * territory_count
