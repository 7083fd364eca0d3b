class RunStateError(Exception):
    """Raised when an operation does not fit the run's current phase or turn."""
