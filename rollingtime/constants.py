"""Constants used throughout the RollingTime application."""

# Default configuration values
DEFAULT_TAU = 60  # Seconds, same unit as the input timestamps
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CONSOLE_LEVEL = "WARNING"

# Log rotation defaults
DEFAULT_LOG_MAX_BYTES = 10_485_760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 30

# Structured output
DEFAULT_SNAPSHOTS_FILENAME = "window_snapshots.jsonl"

# Console table
TABLE_HEADER = "   Time       Value N_O Roll_Sum Min_Value Max_Value"
TABLE_RULE = "-" * 55
ROW_FORMAT = "%12d %.5f%3d %.5f %.5f %.5f"
FRACTIONAL_ROW_FORMAT = "%12.5f %.5f%3d %.5f %.5f %.5f"

# CLI exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
