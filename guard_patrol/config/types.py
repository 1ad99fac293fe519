"""Configuration dataclasses and result containers for patrol runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from guard_patrol.config.constants import DEFAULT_WORKERS, MAX_WORKERS

__all__ = [
    "CandidatePolicy",
    "PatrolSummary",
    "SearchConfig",
]


class CandidatePolicy(Enum):
    """Which cells the obstruction search tries."""

    TRAIL = "trail"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class SearchConfig:
    """Obstruction-search runtime parameters."""

    candidate_policy: CandidatePolicy = CandidatePolicy.TRAIL
    workers: int = DEFAULT_WORKERS

    def __post_init__(self) -> None:
        if not isinstance(self.candidate_policy, CandidatePolicy):
            raise ValueError("candidate_policy must be a CandidatePolicy")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.workers > MAX_WORKERS:
            raise ValueError(f"workers must be <= {MAX_WORKERS}")


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PatrolSummary:
    """Top-level result for one map: baseline patrol plus obstruction search."""

    visited_cells: int
    baseline_outcome: str
    loop_obstructions: int
    candidates_tested: int
    blocked_candidates: int

    def to_dict(self) -> dict[str, int | str]:
        return {
            "visited_cells": self.visited_cells,
            "baseline_outcome": self.baseline_outcome,
            "loop_obstructions": self.loop_obstructions,
            "candidates_tested": self.candidates_tested,
            "blocked_candidates": self.blocked_candidates,
        }
