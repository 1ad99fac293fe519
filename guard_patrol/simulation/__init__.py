"""Simulation engine: single-run patrol tracing."""

from guard_patrol.simulation.tracer import (
    PatrolOutcome,
    PatrolTrace,
    trace_patrol,
    validate_setup,
)

__all__ = [
    "PatrolOutcome",
    "PatrolTrace",
    "trace_patrol",
    "validate_setup",
]
