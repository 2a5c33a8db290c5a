"""Small utilities for strings, string arrays and maps, time points, processes and buffers."""

__version__ = "0.1.0"

__all__ = [
    "buffers",
    "errors",
    "process",
    "string_array",
    "string_map",
    "text",
    "timepoint",
]