"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Operand outside the range accepted by a domain operation.

    Raised by :func:`hello_world_plus.domain.behaviors.calculate_sum` when an
    operand lies outside ``[SUM_LOWER_BOUND, SUM_UPPER_BOUND]``. Inherits from
    ValueError so generic ``except ValueError`` handlers still catch it.

    Example:
        >>> from hello_world_plus.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("Numbers must be within valid range!")
        >>> str(err)
        'Numbers must be within valid range!'
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "InvalidArgumentError",
]
