"""
Survival rules for Conway's Game of Life.

A rule decides whether a currently-live cell survives into the next
generation given its live neighbor count. Birth of dead cells is not a
rule concern: the board always applies the fixed "exactly 3" birth rule.
Any callable taking a neighbor count and returning a bool can be used
as a rule.
"""

from typing import Callable, FrozenSet, Iterable, Optional


# Standard Conway rules - unmodified
SURVIVAL_COUNTS: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_COUNT: int = 3                                  # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8

Rule = Callable[[int], bool]


def standard_survival(alive_neighbors: int) -> bool:
    """Apply Conway's survival rule to a live cell.

    Args:
        alive_neighbors: Number of live neighbors (0-8)

    Returns:
        True if the cell stays alive, False if it dies
    """
    return alive_neighbors in SURVIVAL_COUNTS


class SurvivalRule:
    """Survival rule defined by the set of neighbor counts a live cell survives with.

    Instances are immutable and can be passed anywhere a plain rule
    function is accepted.
    """

    __slots__ = ("_counts",)

    def __init__(self, survival_counts: Optional[Iterable[int]] = None):
        """Initialize rule.

        Args:
            survival_counts: Neighbor counts for live cell survival (default {2,3})

        Raises:
            ValueError: If any count is outside 0-8
        """
        counts = frozenset(SURVIVAL_COUNTS if survival_counts is None else survival_counts)
        invalid = sorted(n for n in counts if not 0 <= n <= MAX_NEIGHBORS)
        if invalid:
            raise ValueError(f"Survival counts must be between 0 and {MAX_NEIGHBORS}, got {invalid}")
        object.__setattr__(self, "_counts", counts)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def standard(cls) -> 'SurvivalRule':
        """Create standard Conway survival rule (2 or 3 neighbors)."""
        return cls(SURVIVAL_COUNTS)

    @property
    def survival_counts(self) -> FrozenSet[int]:
        return self._counts

    def next_state(self, alive_neighbors: int) -> bool:
        """Return True if a live cell with this many neighbors survives."""
        return alive_neighbors in self._counts

    def __call__(self, alive_neighbors: int) -> bool:
        return self.next_state(alive_neighbors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SurvivalRule):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(self._counts)

    def __repr__(self) -> str:
        return f"SurvivalRule(survival={sorted(self._counts)})"
