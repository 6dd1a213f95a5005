"""Plots of a traced splash run."""

from typing import Optional

import numpy as np
from matplotlib.figure import Figure

from experimenter.trace import Trace

PHASE_COLORS = {
    'ROTATING': '#ff9600',
    'MERGING': '#02d1ac',
    'SINGULAR': '#00c6ff',
    'EXPANDING': '#ff3891',
}


def plot_trace(trace: Trace, path: Optional[str] = None, title: str = "Splash run") -> Figure:
    """
    Plot ring/circle/hole radii and ring angle against time.

    Uses the object-oriented Figure API so no display is needed.

    Args:
        trace: Trace from trace_run()
        path: Optional file to save the figure to
        title: Figure title

    Returns:
        The matplotlib Figure
    """
    fig = Figure(figsize=(10, 7), layout='constrained')
    ax_radius, ax_angle = fig.subplots(2, 1, sharex=True)

    ax_radius.plot(trace.time, trace.ring_radius, label='ring radius')
    ax_radius.plot(trace.time, trace.circle_radius, label='circle radius')
    ax_radius.set_ylabel('radius (px)')
    ax_radius.grid(True, alpha=0.3)

    # hole radius is on a much larger scale
    ax_hole = ax_radius.twinx()
    ax_hole.plot(trace.time, trace.hole_radius, color='black', linestyle='--', label='hole radius')
    ax_hole.set_ylabel('hole radius (px)')

    lines = ax_radius.get_lines() + ax_hole.get_lines()
    ax_radius.legend(lines, [line.get_label() for line in lines], loc='upper left')

    ax_angle.plot(trace.time, np.degrees(trace.angle), color='gray')
    ax_angle.set_ylabel('ring angle (deg)')
    ax_angle.set_xlabel('time (s)')
    ax_angle.set_ylim(0, 360)
    ax_angle.grid(True, alpha=0.3)

    _shade_phases(ax_radius, trace)
    _shade_phases(ax_angle, trace)

    fig.suptitle(title)
    if path is not None:
        fig.savefig(path)
    return fig


def _shade_phases(ax, trace: Trace):
    """Shade the time span of each phase."""
    end_time = trace.time[-1] if len(trace) else 0.0
    spans = trace.transitions + [(end_time, None)]
    for (start, name), (stop, _) in zip(spans, spans[1:]):
        color = PHASE_COLORS.get(name)
        if color is not None and stop > start:
            ax.axvspan(start, stop, color=color, alpha=0.08)
