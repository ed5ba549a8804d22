from __future__ import annotations

from dataclasses import dataclass
from typing import Sized


@dataclass
class ScoringRules:
    base_points: int = 10
    chain_multiplier: int = 2
    group_bonus: int = 5
    min_group_size: int = 4

    def qualifies(self, group: Sized) -> bool:
        return len(group) >= self.min_group_size

    def score_for_pass(self, cleared: int, chain: int) -> int:
        """Points for one clearing pass; ``chain`` is 1-based."""
        if cleared <= 0:
            return 0
        multiplier = self.chain_multiplier ** (chain - 1)
        bonus = max(0, cleared - self.min_group_size) * self.group_bonus
        return cleared * self.base_points * multiplier + bonus
