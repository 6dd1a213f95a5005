"""Experimenter package for tracing and plotting splash runs."""

from .trace import Trace, trace_run

__all__ = ['Trace', 'trace_run']
