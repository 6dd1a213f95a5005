"""Plotter module for traced splash runs."""

from .plotter import plot_trace

__all__ = ['plot_trace']
