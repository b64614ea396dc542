"""
Progression state and graph.

ProgressionState is the append-only record of what the simulated player
has unlocked so far in a run. ProgressionGraph answers which dependent an
item gates and applies the declarative unlock rules from
content/progression.py, tracking partially satisfied dependents.
"""

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Set

from ..content.progression import UnlockRule, UNLOCKED_BY, UNLOCK_RULES, DEPTH_GRANTS

logger = logging.getLogger(__name__)


class ProgressionState:
    """Item key -> unlocked. Entries are only ever added."""

    def __init__(self):
        self._unlocked: Dict[str, bool] = {}

    def unlock(self, key: str) -> bool:
        """Mark an item unlocked. Returns True if it was not unlocked before."""
        if self._unlocked.get(key):
            return False
        self._unlocked[key] = True
        return True

    def is_unlocked(self, key: str) -> bool:
        return self._unlocked.get(key, False)

    def __contains__(self, key: str) -> bool:
        return self.is_unlocked(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._unlocked)

    def __len__(self) -> int:
        return len(self._unlocked)

    def to_list(self) -> List[str]:
        """Unlocked keys in the order they were unlocked."""
        return list(self._unlocked)


class ProgressionGraph:
    """
    Dependency structure between placeable items and what they unlock.

    Usage:
        graph = ProgressionGraph()
        state = ProgressionState()
        newly = graph.propagate("SeamothFragment", state)
        # -> ["Seamoth", "SeamothSolarCharge", "VehicleHullModule1", ...]
    """

    def __init__(
        self,
        unlocked_by: Mapping[str, str] = UNLOCKED_BY,
        rules: Mapping[str, UnlockRule] = UNLOCK_RULES,
        depth_grants: Mapping[str, int] = DEPTH_GRANTS,
    ):
        self.unlocked_by = dict(unlocked_by)
        self.rules = dict(rules)
        self.depth_grants = dict(depth_grants)
        # dependent -> prerequisites seen so far this run
        self._satisfied: Dict[str, Set[str]] = {}

    def reset(self):
        """Forget partial satisfaction from a previous run."""
        self._satisfied = {}

    def dependent_of(self, item: str) -> Optional[str]:
        """The higher-tier item that requires this one, if any."""
        return self.unlocked_by.get(item)

    def is_progression_relevant(self, item: str) -> bool:
        return item in self.rules

    def satisfied(self, dependent: str) -> Set[str]:
        """Prerequisites of a dependent recorded so far."""
        return set(self._satisfied.get(dependent, set()))

    def propagate(self, item: str, state: ProgressionState) -> List[str]:
        """
        Record that an item has been placed and unlock what it completes.

        The dependent unlocks once every prerequisite in its rule has been
        recorded; its fan-out items unlock at the same time. Recording the
        same prerequisite twice, or recording after the dependent already
        unlocked, changes nothing.

        Returns:
            Keys newly unlocked by this call, in unlock order
        """
        dependent = self.dependent_of(item)
        if dependent is None or not self.is_progression_relevant(dependent):
            return []
        if state.is_unlocked(dependent):
            return []

        rule = self.rules[dependent]
        seen = self._satisfied.setdefault(dependent, set())
        seen.add(item)

        missing = rule.requires - seen
        if missing:
            logger.debug(f"  {dependent} waiting on {sorted(missing)}")
            return []

        newly = []
        if state.unlock(dependent):
            newly.append(dependent)
        for extra in sorted(rule.also_unlocks):
            if state.unlock(extra):
                newly.append(extra)

        logger.debug(f"  Unlocked {newly} via {item}")
        return newly

    def reachable_depth(self, state: ProgressionState, base_depth: int) -> int:
        """Deepest depth granted by anything unlocked, at least base_depth."""
        depth = base_depth
        for key in state:
            depth = max(depth, self.depth_grants.get(key, 0))
        return depth
