from .types.format_type import ColorFormat

DEFAULT_FORMAT = ColorFormat.HEX
DEFAULT_ALPHA = 1.0
FALLBACK_RGBA = (0, 0, 0, 1.0)

# Palette sampling
ALPHA_THRESHOLD = 128
SAMPLES_PER_COLOR = 1000
DEFAULT_MAX_ITERATIONS = 10

DEFAULT_DELTA_E_METHOD = "76"

# Channels compare equal within this tolerance
CHANNEL_TOLERANCE = 1e-9
