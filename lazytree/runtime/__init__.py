"""Runtime orchestration package.

Exports the app entrypoint plus loop primitives used by tests.
"""

from .app import run_browser
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

__all__ = [
    "run_browser",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
