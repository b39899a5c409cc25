"""Exception types for RollingTime."""


class WindowConfigError(ValueError):
    """Raised when a rolling window is configured with an unusable duration."""
    def __init__(self, tau=None, message: str = None):
        self.tau = tau
        self.message = message or f"Window duration must be a positive number, got: {tau}"
        super().__init__(self.message)


class OutOfOrderError(ValueError):
    """Raised when an observation is older than the latest accepted one."""
    def __init__(self, timestamp: float, latest: float):
        self.timestamp = timestamp
        self.latest = latest
        self.message = f"Timestamp {timestamp} is older than the latest observation ({latest})"
        super().__init__(self.message)


class ParseError(ValueError):
    """Raised when an input record cannot be turned into an observation."""
    def __init__(self, message: str, line: str = None):
        self.line = line
        self.message = message
        super().__init__(self.message)
