"""
engine/
-------
Recording, replay & playback layer.

    from engine import run_algorithm, reconstruct_graph, PlaybackCursor
"""

from engine.recorder    import StepLog, RunMetrics, run_algorithm, summarize
from engine.state       import GraphState, GridCell, GridState, LinearState
from engine.reconstruct import reconstruct_graph, reconstruct_grid, reconstruct_linear
from engine.stepper     import CursorState, PlaybackCursor, delay_for
from engine.explain     import EXPLANATION_UNAVAILABLE, ClaudeBackend, backend_from_config, explain_step
from engine.session     import VisualizerSession, random_values

__all__ = [
    "StepLog",
    "RunMetrics",
    "run_algorithm",
    "summarize",
    "LinearState", "GraphState", "GridCell", "GridState",
    "reconstruct_linear", "reconstruct_graph", "reconstruct_grid",
    "CursorState",
    "PlaybackCursor",
    "delay_for",
    "EXPLANATION_UNAVAILABLE",
    "explain_step",
    "ClaudeBackend",
    "backend_from_config",
    "VisualizerSession",
    "random_values",
]
