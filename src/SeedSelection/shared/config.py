from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeedingConfig:
    """Options shared by the seeding strategies.

    ``keep_first`` keeps the randomly drawn bootstrap point as one of the
    k seeds. By default it is only used to start the traversal and then
    discarded.
    """

    keep_first: bool = False
    n_starts: int = 5

    @property
    def drop_first(self) -> bool:
        return not self.keep_first
