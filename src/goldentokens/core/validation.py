"""Domain guards for the numeric inputs of the token engine."""

import logging
import math
from numbers import Integral, Real

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """A numeric input outside the domain of a derivation."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {name} {value!r}: {reason}")


def validate_base_size(value: object) -> float:
    """Check a base size and return it as a float.

    Args:
        value: Candidate base size in px.

    Returns:
        The base size as a float.

    Raises:
        DomainError: If the value is not a finite number greater than zero.
    """
    # bool is an Integral; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        logger.debug("Rejected base size %r: not a number", value)
        raise DomainError("base size", value, "must be a number")
    size = float(value)
    if not math.isfinite(size):
        logger.debug("Rejected base size %r: not finite", value)
        raise DomainError("base size", value, "must be finite")
    if size <= 0:
        logger.debug("Rejected base size %r: not positive", value)
        raise DomainError("base size", value, "must be greater than zero")
    return size


def validate_column_count(value: object) -> int:
    """Check a hybrid layout column count.

    Raises:
        DomainError: If the count is not an integer of at least 2.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise DomainError("column count", value, "must be an integer")
    if value < 2:
        raise DomainError("column count", value, "needs at least 2 columns")
    return int(value)
