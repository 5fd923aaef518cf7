"""
errors.py — Error Taxonomy
===========================
Shared by the algorithms, the graph layer and the engine.

    TraceError
     ├── UnsupportedAlgorithmError   unknown registry key        (also ValueError)
     ├── InvalidInputError           bad array / graph / ids     (also ValueError)
     └── CursorOutOfRangeError       reconstruct past the log    (also IndexError)

Unreachable goals are NOT errors: the run simply ends without a path.
"""


class TraceError(Exception):
    """Base class for every error raised by the trace engine."""


class UnsupportedAlgorithmError(TraceError, ValueError):
    def __init__(self, algo_key: str):
        super().__init__(f"Unknown algorithm: {algo_key}")
        self.algo_key = algo_key


class InvalidInputError(TraceError, ValueError):
    """Input rejected before any step was recorded."""


class CursorOutOfRangeError(TraceError, IndexError):
    def __init__(self, cursor: int, length: int):
        super().__init__(f"Cursor {cursor} out of range [-1, {length - 1}]")
        self.cursor = cursor
        self.length = length
