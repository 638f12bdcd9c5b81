"""
Element id generation

An IdGenerator is created per render call (or handed in by the caller) and
threaded through the render context. There is no process-wide counter, so
parallel renders never collide and tests need no reset between cases.
"""

from typing import Optional


class IdGenerator:
    """
    Sequential id source: w0, w1, w2, ...

    Example:
        >>> ids = IdGenerator()
        >>> ids.id_next(), ids.id_next("tab")
        ('w0', 'w1-tab')
    """

    def __init__(self, prefix: Optional[str] = None, start: int = 0) -> None:
        from ..config import appsettings

        self.prefix = appsettings.id_prefix if prefix is None else prefix
        self.counter = start

    def id_next(self, suffix: str = "") -> str:
        """Return the next id, optionally suffixed with ``-suffix``"""
        base = f"{self.prefix}{self.counter}"
        self.counter += 1
        return f"{base}-{suffix}" if suffix else base
