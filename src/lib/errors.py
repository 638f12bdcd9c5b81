"""
Error types for bootnav
"""


class ConfigurationError(Exception):
    """
    Raised when a nav, item or loader definition is invalid.

    Covers items that are both active and disabled, empty labels where a
    label is required, and unknown variants, tags or renderer names.
    These are programmer errors; nothing retries them.
    """
    pass
