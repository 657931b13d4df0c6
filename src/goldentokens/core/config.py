"""Generator options supplied by the host framework."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from goldentokens.core.constants import DEFAULT_BASE_SIZE
from goldentokens.core.validation import validate_base_size

logger = logging.getLogger(__name__)

# Option keys, as spelled in the host's plugin options
_KEY_BASE_SIZE = "baseSize"

_KNOWN_KEYS = frozenset({_KEY_BASE_SIZE})


@dataclass(frozen=True)
class TokenOptions:
    """Validated options for one generator invocation.

    Example:
        options = TokenOptions.from_mapping({"baseSize": 18})
        spacing = compute_spacing_scale(options.base_size)

    Attributes:
        base_size: Base length in px that spacing and typography scale from.
    """

    base_size: float = field(default=DEFAULT_BASE_SIZE)

    def __post_init__(self) -> None:
        """Reject base sizes outside the domain instead of clamping them."""
        object.__setattr__(self, "base_size", validate_base_size(self.base_size))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "TokenOptions":
        """Build options from a plugin options mapping.

        Unknown keys are ignored with a warning.

        Args:
            options: Mapping such as ``{"baseSize": 16}``, or None for defaults.

        Returns:
            Validated TokenOptions.

        Raises:
            DomainError: If the base size is invalid.
        """
        if not options:
            return cls()

        for key in options:
            if key not in _KNOWN_KEYS:
                logger.warning("Ignoring unknown token option: %s", key)

        return cls(base_size=options.get(_KEY_BASE_SIZE, DEFAULT_BASE_SIZE))

    def to_mapping(self) -> dict[str, float]:
        """Return the options in plugin-options form."""
        return {_KEY_BASE_SIZE: self.base_size}
