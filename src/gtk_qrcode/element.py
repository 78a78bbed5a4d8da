# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Iterator

from .style import StyleRefinement


@dataclass(frozen=True)
class Element:
    """
    A styled box in the declarative tree a render pass produces.

    Containers set ``grid_cols`` and lay their children out row-major in
    that many columns. Leaves have no children; ``filled`` marks the ones
    that draw a dot.
    """

    style: StyleRefinement = field(default_factory=StyleRefinement)
    children: tuple['Element', ...] = ()
    grid_cols: int | None = None
    filled: bool = False

    @property
    def is_grid(self) -> bool:
        return self.grid_cols is not None

    def rows(self) -> list[tuple['Element', ...]]:
        """Split the children into grid rows; the last one may be short."""
        if not self.grid_cols:
            return []
        return [
            self.children[start:start + self.grid_cols]
            for start in range(0, len(self.children), self.grid_cols)
        ]

    def leaves(self) -> Iterator['Element']:
        if not self.is_grid:
            yield self
            return
        for child in self.children:
            yield from child.leaves()
