"""RenderAccumulator: opt-in profiling for document layout.

This module provides accumulated metrics during rendering:
- Number of render() calls and stack frames processed
- Output length
- Group decisions (flat vs broken) and fits checks
- Union rollbacks

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from prettydoc import render
    from prettydoc.profiling import profiled_render

    with profiled_render() as metrics:
        render(doc)

    print(metrics.summary())
    # {"total_ms": 0.4, "render_calls": 1, "groups_flat": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during document rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render() calls recorded.
        node_count: Stack frames processed by the layout walk.
        output_length: Total characters produced.
        groups_flat: Groups laid out flat.
        groups_broken: Groups laid out broken.
        fits_checks: Fits lookaheads run.
        union_rollbacks: Union attempts discarded for overflowing.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    node_count: int = 0
    output_length: int = 0
    groups_flat: int = 0
    groups_broken: int = 0
    fits_checks: int = 0
    union_rollbacks: int = 0

    def record_render(
        self,
        *,
        node_count: int,
        output_length: int,
        groups_flat: int,
        groups_broken: int,
        fits_checks: int,
        union_rollbacks: int,
    ) -> None:
        """Record one render call."""
        self.render_calls += 1
        self.node_count += node_count
        self.output_length += output_length
        self.groups_flat += groups_flat
        self.groups_broken += groups_broken
        self.fits_checks += fits_checks
        self.union_rollbacks += union_rollbacks

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "node_count": self.node_count,
            "output_length": self.output_length,
            "groups_flat": self.groups_flat,
            "groups_broken": self.groups_broken,
            "fits_checks": self.fits_checks,
            "union_rollbacks": self.union_rollbacks,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
