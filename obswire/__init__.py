"""Message building and parsing for the OBS Studio WebSocket v5 protocol.

Submodules: codecs, protocol, the requests_* builders, the responses_*
models and transition_settings.
"""

__version__ = "0.1.0"

__all__ = [
    "codecs",
    "protocol",
    "requests_general",
    "requests_scenes",
    "requests_inputs",
    "requests_ui",
    "responses_general",
    "responses_sources",
    "responses_outputs",
    "transition_settings",
]