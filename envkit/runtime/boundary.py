"""Process boundary for fail-fast configuration errors.

Required accessors raise instead of exiting so that libraries and tests can
handle them. Entry points wrap their startup in ``fatal_boundary`` to turn
those errors back into a process exit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ..errors import FatalEnvError, classify_error

logger = logging.getLogger(__name__)


@contextmanager
def fatal_boundary(exit_code: int = 1) -> Iterator[None]:
    """Exit the process when a ``FatalEnvError`` escapes the block.

    Any other exception propagates unchanged.

    Args:
        exit_code: Status passed to ``SystemExit``.

    Example:
        >>> with fatal_boundary():
        ...     api_key = env.must_get("API_KEY")
    """
    try:
        yield
    except FatalEnvError as exc:
        logger.critical("fatal configuration error [%s]: %s", classify_error(exc), exc)
        raise SystemExit(exit_code) from exc


__all__ = ["fatal_boundary"]
