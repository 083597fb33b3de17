class RedactionError(Exception):
    """Raised when contract text cannot be redacted."""
