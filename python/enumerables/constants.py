VERSION = "1.0.0"

# logging defaults
DEFAULT_LOGGING_LEVEL = "warning"
DEFAULT_LOGGING_TARGET = "stderr"
