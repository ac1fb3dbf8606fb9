"""
Stream Protocol Constants

Central location for the literals shared by the decoders and the
configuration layer.
"""

# OpenAI-compatible end-of-stream sentinel, sent as a raw `data:` payload
DONE_SENTINEL = "[DONE]"

# Location of usage accounting inside a chunk, per provider family
GENERIC_USAGE_KEY = "usage"
GROQ_USAGE_PATH = ("x_groq", "usage")

# Environment variables read by `load_capture_defaults`
CAPTURE_CONTENT_ENV_VAR = "CHATSTREAM_CAPTURE_CONTENT"
CAPTURE_REASONING_ENV_VAR = "CHATSTREAM_CAPTURE_REASONING"
CAPTURE_USAGE_ENV_VAR = "CHATSTREAM_CAPTURE_USAGE"
CAPTURE_TOOLS_ENV_VAR = "CHATSTREAM_CAPTURE_TOOLS"

TRUTHY_VALUES = ("1", "true", "yes", "on")
