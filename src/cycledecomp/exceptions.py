from __future__ import annotations


class CycleDecompError(Exception):
    """Base class for errors raised by cycledecomp."""


class ConfigError(CycleDecompError, ValueError):
    """A setting, usually from the environment, has an unusable value."""


class ScheduleError(ConfigError):
    """The size scheduler cannot produce a usable queue of cycle lengths."""


class GraphInputError(CycleDecompError, ValueError):
    """Vertex or edge input that the graph refuses to represent."""
