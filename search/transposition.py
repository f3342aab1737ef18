from __future__ import annotations
from typing import Dict


class Transposition:
    """Store the largest remaining move budget seen per packed state key."""
    def __init__(self) -> None:
        self.best_budget: Dict[int, int] = {}

    def seen_better(self, key: int, remaining: int) -> bool:
        old = self.best_budget.get(key)
        if old is None or remaining > old:
            self.best_budget[key] = remaining
            return False
        return True

    def __len__(self) -> int:
        return len(self.best_budget)
