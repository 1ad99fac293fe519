"""Experiments layer: obstruction search and the command-line entrypoint."""

from guard_patrol.experiments.obstruction import (
    ObstructionReport,
    baseline_candidates,
    classify_candidate,
    exhaustive_candidates,
    find_loop_obstructions,
    run_patrol,
)

__all__ = [
    "ObstructionReport",
    "baseline_candidates",
    "classify_candidate",
    "exhaustive_candidates",
    "find_loop_obstructions",
    "run_patrol",
]
