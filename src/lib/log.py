"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of whatever state object was last connected
in the current context, so renderers deep in the call tree can log
without having the state passed to them.

Features:
- Verbosity taken from the connected ProgramState (or any object with
  a ``verbosity`` attribute)
- BOOTNAV_DEBUG_MODE=true forces every message through
- Context-local via contextvars, so concurrent renders do not share a level

Usage:
    from bootnav.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Rendered nav", level=1)
    LOG("Resolved active flags", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold the connected state
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <22}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a state object to the logging context.

    Args:
        state: Object with a ``verbosity`` attribute (1=normal, 2=verbose, 3=trace)
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Return the verbosity of the connected state, or 0 if none is connected"""
    state = _program_state.get()
    return int(getattr(state, 'verbosity', 0)) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Loaded nav.yaml", level=1)
        LOG("Rendering 4 visible items", level=2)
        LOG("Item 2 matched '/orders'", level=3)
    """
    from ..config import appsettings

    if appsettings.debug_mode or verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
