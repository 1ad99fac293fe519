"""Obstruction search: which single new obstacle traps the agent in a loop.

A new obstacle can only change the patrol if the baseline agent would have
walked through that cell, so the default candidate set is the baseline
trail minus the start cell. The exhaustive policy tries every empty cell
and exists to cross-check that restriction.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from guard_patrol.config.types import CandidatePolicy, PatrolSummary, SearchConfig
from guard_patrol.domain.agent import Agent
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.simulation.tracer import (
    PatrolOutcome,
    PatrolTrace,
    trace_patrol,
    validate_setup,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObstructionReport:
    """Per-candidate classification of one obstruction search."""

    outcomes: dict[Position, PatrolOutcome]
    loop_positions: frozenset[Position]

    @property
    def candidates_tested(self) -> int:
        return len(self.outcomes)

    @property
    def loop_count(self) -> int:
        return len(self.loop_positions)

    def outcome_counts(self) -> Counter[PatrolOutcome]:
        return Counter(self.outcomes.values())


# ---------------------------------------------------------------------------
# Candidate selection
# ---------------------------------------------------------------------------


def baseline_candidates(
    grid: Grid, agent: Agent, baseline: PatrolTrace | None = None
) -> list[Position]:
    """Return baseline-trail cells other than the start, in first-visit order."""
    trace = baseline if baseline is not None else trace_patrol(grid, agent)
    return [position for position in trace.visited if position != agent.start]


def exhaustive_candidates(grid: Grid, agent: Agent) -> list[Position]:
    """Return every empty cell other than the start, row-major."""
    return [
        position
        for position in grid.cells()
        if position != agent.start and not grid.is_obstacle(position)
    ]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_candidate(grid: Grid, agent: Agent, position: Position) -> PatrolOutcome:
    """Trace the patrol on *grid* with one extra obstacle at *position*."""
    return trace_patrol(grid.with_obstacle(position), agent).outcome


def _classify_chunk(
    grid: Grid, agent: Agent, positions: Sequence[Position]
) -> dict[Position, PatrolOutcome]:
    """Worker entrypoint: classify a chunk of candidates independently."""
    return {position: classify_candidate(grid, agent, position) for position in positions}


def _chunked(items: Sequence[Position], n_chunks: int) -> list[list[Position]]:
    """Split *items* into at most *n_chunks* contiguous, non-empty chunks."""
    n_chunks = max(1, min(n_chunks, len(items)))
    size, remainder = divmod(len(items), n_chunks)
    chunks: list[list[Position]] = []
    start = 0
    for i in range(n_chunks):
        end = start + size + (1 if i < remainder else 0)
        chunks.append(list(items[start:end]))
        start = end
    return [chunk for chunk in chunks if chunk]


def _classify_all(
    grid: Grid, agent: Agent, candidates: Sequence[Position], workers: int
) -> dict[Position, PatrolOutcome]:
    if workers == 1 or len(candidates) < 2:
        return _classify_chunk(grid, agent, candidates)

    chunks = _chunked(candidates, workers)
    outcomes: dict[Position, PatrolOutcome] = {}
    with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
        futures = [executor.submit(_classify_chunk, grid, agent, chunk) for chunk in chunks]
        # merge in submission order so the report is deterministic
        for future in futures:
            outcomes.update(future.result())
    return outcomes


def _unique(positions: Iterable[Position]) -> list[Position]:
    return list(dict.fromkeys(positions))


def find_loop_obstructions(
    grid: Grid,
    agent: Agent,
    config: SearchConfig | None = None,
    baseline: PatrolTrace | None = None,
) -> ObstructionReport:
    """Classify every obstruction candidate and collect the loop-inducing ones.

    Candidates already holding an obstacle, and the agent's own start cell,
    are never tried. A blocked or exiting candidate is recorded and the
    search moves on.
    """
    search_config = config or SearchConfig()
    validate_setup(grid, agent)

    if search_config.candidate_policy == CandidatePolicy.EXHAUSTIVE:
        candidates = exhaustive_candidates(grid, agent)
    else:
        candidates = baseline_candidates(grid, agent, baseline=baseline)
    candidates = _unique(candidates)
    logger.info(
        "testing %d obstruction candidates (policy=%s, workers=%d)",
        len(candidates),
        search_config.candidate_policy.value,
        search_config.workers,
    )

    outcomes = _classify_all(grid, agent, candidates, search_config.workers)
    loop_positions = frozenset(
        position for position, outcome in outcomes.items() if outcome is PatrolOutcome.LOOP
    )
    logger.info(
        "found %d loop-inducing obstructions among %d candidates",
        len(loop_positions),
        len(outcomes),
    )
    return ObstructionReport(outcomes=outcomes, loop_positions=loop_positions)


def run_patrol(
    grid: Grid, agent: Agent, config: SearchConfig | None = None
) -> tuple[PatrolTrace, ObstructionReport, PatrolSummary]:
    """Baseline patrol plus obstruction search for one map."""
    validate_setup(grid, agent)
    baseline = trace_patrol(grid, agent)
    if baseline.outcome is not PatrolOutcome.EXITED:
        logger.warning(
            "baseline patrol did not exit (outcome=%s); searching its partial trail",
            baseline.outcome.value,
        )
    report = find_loop_obstructions(grid, agent, config=config, baseline=baseline)
    summary = PatrolSummary(
        visited_cells=baseline.visited_count,
        baseline_outcome=baseline.outcome.value,
        loop_obstructions=report.loop_count,
        candidates_tested=report.candidates_tested,
        blocked_candidates=report.outcome_counts()[PatrolOutcome.BLOCKED],
    )
    return baseline, report, summary
