"""Input-layer public API for key decoding and key handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
normal-mode handler used by the runtime loop.
"""

from .key_normal import NormalKeyContext, NormalKeyHandler, handle_normal_key, show_status
from .key_registry import KeyBinding, KeyRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyBinding",
    "KeyRegistry",
    "NormalKeyContext",
    "NormalKeyHandler",
    "handle_normal_key",
    "show_status",
]
