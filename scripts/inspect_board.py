from __future__ import annotations

import argparse
import logging
from typing import List

import numpy as np

from dicewars.config import BoardConfig
from dicewars.game import AttackAdvisor, Board, Player


def parse_player_names(raw_value: str) -> List[str]:
    names = [chunk.strip() for chunk in raw_value.split(",") if chunk.strip()]
    if not names:
        raise ValueError("At least one player name must be provided.")
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique, got: {raw_value}.")
    return names


def render_grid(board: Board) -> str:
    index = {player: position for position, player in enumerate(board.players)}
    lines = []
    for cells in board.grid:
        row = []
        for territory in cells:
            if not territory.playable:
                row.append(" .. ")
            else:
                row.append(f"{index[territory.owner]}:{territory.dice:<2}")
        lines.append(" ".join(row))
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Set up a board and summarize it.")
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--columns", type=int, default=8)
    parser.add_argument("--victims", type=int, default=6)
    parser.add_argument("--max-dice", type=int, default=8)
    parser.add_argument(
        "--players",
        type=str,
        default="red,blue",
        help="Comma-separated player names, in turn order.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log setup details.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    config = BoardConfig(
        rows=args.rows,
        columns=args.columns,
        victims=args.victims,
        max_dice=args.max_dice,
        seed=args.seed,
    )
    players = [Player(name) for name in parse_player_names(args.players)]
    rng = np.random.default_rng(config.seed)
    board = Board.from_config(players, config, rng=rng)

    print(render_grid(board))
    print()
    for position, player in enumerate(players):
        advisor = AttackAdvisor(player, rng=rng)
        suggestion = "none"
        if advisor.evaluate(board):
            attacker = advisor.choose_attacker()
            defender = advisor.choose_defender()
            suggestion = (
                f"{attacker.position} ({attacker.dice}) -> "
                f"{defender.position} ({defender.dice})"
            )
        print(
            f"[{position}] {player.name}: "
            f"territories={board.count_territories(player)} "
            f"dice={board.dice_count_of(player)} "
            f"largest_cluster={board.largest_cluster_size_for(player)} "
            f"attack={suggestion}"
        )


if __name__ == "__main__":
    main()
