from __future__ import annotations

import logging
from typing import Any, Iterator, List, Sequence

import numpy as np

from dicewars.config import BoardConfig, validate_board_parameters
from dicewars.errors import OutOfBoundsError

from .graph import AdjacencyGraph
from .rules import dice_budget, is_enemy
from .territory import Territory

logger = logging.getLogger(__name__)


class Board:
    """Grid of territories plus the adjacency graph that links them.

    Territory ids are row-major (``id = row * columns + col``) and double as
    vertex ids in :attr:`graph`. Setup runs once in the constructor: create
    cells, pick victims and build the graph, partition playable cells among
    ``players`` round-robin, then hand out dice. All randomness comes from
    ``rng``.
    """

    def __init__(
        self,
        players: Sequence[Any],
        rows: int,
        columns: int,
        victims: int,
        max_dice: int,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        validate_board_parameters(len(players), rows, columns, victims, max_dice)
        self.rows = rows
        self.columns = columns
        self.victims = victims
        self.num_territories = rows * columns
        self.occupied = self.num_territories - victims
        self.max_dice = max_dice
        self.players = list(players)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.grid: List[List[Territory]] = self._create_territories()
        self.graph = self._build_graph()
        self._partition_territories()
        self._distribute_dice()
        logger.debug(
            "Board %dx%d ready: %d players, %d playable cells, %d edges",
            rows,
            columns,
            len(self.players),
            len(self.playable_territories()),
            self.graph.edge_count(),
        )

    @classmethod
    def from_config(
        cls,
        players: Sequence[Any],
        config: BoardConfig,
        rng: np.random.Generator | None = None,
    ) -> "Board":
        return cls(
            players,
            config.rows,
            config.columns,
            config.victims,
            config.max_dice,
            rng=rng if rng is not None else np.random.default_rng(config.seed),
        )

    def _create_territories(self) -> List[List[Territory]]:
        grid = []
        for row in range(self.rows):
            cells = []
            for col in range(self.columns):
                territory = Territory(self.columns)
                territory.id = row * self.columns + col
                cells.append(territory)
            grid.append(cells)
        return grid

    def _build_graph(self) -> AdjacencyGraph:
        graph = AdjacencyGraph(self.num_territories)

        # Draws are with replacement; repeated cells just get re-marked.
        for _ in range(self.victims):
            row = int(self.rng.integers(self.rows))
            col = int(self.rng.integers(self.columns))
            victim = self.grid[row][col]
            victim.playable = False
            graph.deactivate_vertex(victim.id)
            logger.debug("Victim cell at (%d, %d)", row, col)

        for row in range(self.rows):
            for col in range(self.columns):
                territory = self.grid[row][col]
                if not territory.playable:
                    continue
                if row + 1 < self.rows and self.grid[row + 1][col].playable:
                    graph.add_edge(territory.id, self.grid[row + 1][col].id)
                if col + 1 < self.columns and self.grid[row][col + 1].playable:
                    graph.add_edge(territory.id, self.grid[row][col + 1].id)
        return graph

    def _partition_territories(self) -> None:
        playable = self.playable_territories()
        order = self.rng.permutation(len(playable))
        for index, position in enumerate(order):
            playable[position].owner = self.players[index % len(self.players)]

    def _distribute_dice(self) -> None:
        for player in self.players:
            owned = self.territories_owned_by(player)
            remaining = dice_budget(len(owned))
            for territory in owned:
                territory.dice = 1
                remaining -= 1

            # Rejection sampling; terminates because max_dice >= 3 was validated.
            while remaining > 0:
                territory = owned[int(self.rng.integers(len(owned)))]
                if territory.dice < self.max_dice:
                    territory.dice += 1
                    remaining -= 1
            logger.debug(
                "%r holds %d territories with %d dice",
                player,
                len(owned),
                self.dice_count_of(player),
            )

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise OutOfBoundsError(row, col, self.rows, self.columns)

    def get_territory(self, row: int, col: int) -> Territory:
        self._check_bounds(row, col)
        return self.grid[row][col]

    def get_territory_id(self, row: int, col: int) -> int:
        return self.get_territory(row, col).id

    def territory_by_id(self, territory_id: int) -> Territory:
        if not 0 <= territory_id < self.num_territories:
            raise OutOfBoundsError(
                territory_id // self.columns,
                territory_id % self.columns,
                self.rows,
                self.columns,
            )
        return self.grid[territory_id // self.columns][territory_id % self.columns]

    def territories(self) -> Iterator[Territory]:
        for cells in self.grid:
            yield from cells

    def playable_territories(self) -> List[Territory]:
        return [territory for territory in self.territories() if territory.playable]

    def territories_owned_by(self, player: Any) -> List[Territory]:
        return [territory for territory in self.territories() if territory.owner is player]

    def count_territories(self, player: Any) -> int:
        return len(self.territories_owned_by(player))

    def dice_count_of(self, player: Any) -> int:
        return sum(territory.dice for territory in self.territories_owned_by(player))

    def neighbors_of(self, territory: Territory) -> List[Territory]:
        return [
            self.grid[vertex // self.columns][vertex % self.columns]
            for vertex in self.graph.neighbors_of(territory.id)
        ]

    def enemy_neighbors_of(self, territory: Territory) -> List[Territory]:
        return [
            neighbor
            for neighbor in self.neighbors_of(territory)
            if is_enemy(territory, neighbor)
        ]

    def largest_cluster_size_for(self, player: Any) -> int:
        return self.graph.largest_cluster_size(
            lambda vertex: self.territory_by_id(vertex).owner is player
        )
