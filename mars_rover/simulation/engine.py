"""Run engine: replay one command string and write optional artifacts."""

from __future__ import annotations

import logging

from mars_rover.config.types import RunConfig, RunResult
from mars_rover.domain.rover import RoverState
from mars_rover.domain.snapshot import StepRecord
from mars_rover.io.paths import default_trace_path
from mars_rover.simulation.persistence import write_trace
from mars_rover.viz import render as viz_render
from mars_rover.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def run_rover(config: RunConfig, theme: Theme = DEFAULT_THEME) -> RunResult:
    """Execute *config* and return the final state with run statistics.

    Rover validation errors propagate unchanged. A trace is written when
    ``trace_path`` is set, or next to the plot when only ``plot_path`` is.
    """
    rover = RoverState(config.x, config.y, config.direction, config.width, config.height)
    initial = rover.snapshot()
    logger.info(
        "Starting rover at %s on %dx%d grid with %d commands",
        initial.as_string(),
        config.width,
        config.height,
        len(config.commands),
    )

    records: list[StepRecord] = []
    rover.process_commands(config.commands, on_step=records.append)
    blocked_moves = sum(1 for record in records if record.blocked)
    final = rover.snapshot()
    logger.info("Rover finished at %s (%d blocked moves)", final.as_string(), blocked_moves)

    trace_path = config.trace_path
    plot_path = None
    if config.plot_path is not None:
        plot_trace = trace_path or default_trace_path(config.plot_path)
        write_trace(initial, records, plot_trace)
        logger.info("Wrote trace with %d rows to %s", len(records) + 1, plot_trace)
        plot_path = viz_render.render_trajectory(
            plot_trace, config.plot_path, config.width, config.height, theme=theme
        )
        logger.info("Rendered trajectory to %s", plot_path)
        trace_path = plot_trace
    elif trace_path is not None:
        write_trace(initial, records, trace_path)
        logger.info("Wrote trace with %d rows to %s", len(records) + 1, trace_path)

    return RunResult(
        final=final,
        steps=len(records),
        blocked_moves=blocked_moves,
        trace_path=trace_path,
        plot_path=plot_path,
    )
