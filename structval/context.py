"""
Context manager for validation configuration (e.g., error rendering limits).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Optional

# Context variable for the cap on rendered `found` text
_max_found_length: ContextVar[Optional[int]] = ContextVar(
    "max_found_length", default=None
)


def max_found_length() -> Optional[int]:
    """Return the current cap on rendered `found` text, or None if uncapped."""
    return _max_found_length.get()


@contextmanager
def validation_context(*, max_found_length: Optional[int] = None):
    """
    Context manager for validation configuration.

    Args:
        max_found_length: If set, the rendered `found` value of every error
                          produced inside the block is cut to this many
                          characters and suffixed with "...". Useful when
                          inputs can be large and errors end up in logs.

    Example:
        from structval import all_elements, number_val, validation_context

        big = ["x"] * 10_000

        # Normal: `found` holds the full offending value
        all_elements(number_val)([big])

        # Capped: `found` is at most 20 characters plus "..."
        with validation_context(max_found_length=20):
            all_elements(number_val)([big])
    """
    if max_found_length is not None and max_found_length < 1:
        raise ValueError(
            f"max_found_length must be a positive integer, got {max_found_length}"
        )
    token = _max_found_length.set(max_found_length)
    try:
        yield
    finally:
        _max_found_length.reset(token)
