class AnonymizationError(Exception):
    """Raised when structured insight data cannot be anonymized."""
