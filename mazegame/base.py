"""Abstract interfaces for maze generation and route evaluation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

RecordT = TypeVar("RecordT")
ResultT = TypeVar("ResultT")


class AbstractPuzzleGenerator(ABC, Generic[RecordT]):
    """Base class for builders that emit puzzle instances from a seeded source."""

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    @abstractmethod
    def create_puzzle(self, *args, **kwargs) -> RecordT:
        """Create a puzzle from the provided parameters."""

    @abstractmethod
    def create_random_puzzle(self) -> RecordT:
        """Create a single randomized puzzle instance."""

    def generate_dataset(self, count: int) -> List[RecordT]:
        """Generate a batch of puzzles."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.create_random_puzzle() for _ in range(count)]


class AbstractPuzzleEvaluator(ABC, Generic[RecordT, ResultT]):
    """Base class scaffolding for evaluators of candidate solutions."""

    @abstractmethod
    def evaluate(self, puzzle: RecordT, candidate: Sequence[Tuple[int, int]], *args: Any, **kwargs: Any) -> ResultT:
        """Evaluate a candidate solution for the given puzzle."""


__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
]
