"""Hand the generated tokens to the host framework.

The host supplies its sinks as plain callables. Everything is computed
before the first sink runs, so a failed derivation never leaves the host
with a partial batch.

Usage:
    from goldentokens.plugin.registration import Sinks, register_base_utilities

    register_base_utilities(
        Sinks(add_utilities=api.add_utilities, extend_theme=theme.update),
        {"baseSize": 16},
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from goldentokens.core.config import TokenOptions
from goldentokens.core.constants import PHI
from goldentokens.core.formatting import format_number
from goldentokens.plugin.theme import ThemeExtensionBundle, build_theme_extension
from goldentokens.plugin.utilities import build_utilities

logger = logging.getLogger(__name__)

Sink = Callable[[Mapping[str, Any]], object]


@dataclass(frozen=True)
class Sinks:
    """Host operations that receive generated data.

    Attributes:
        add_utilities: Called once per utility group with selector -> declarations.
        extend_theme: Called once with the theme extension tree.
        add_base: Optional; called once with the base rules (":root" variables).
    """

    add_utilities: Sink
    extend_theme: Sink
    add_base: Sink | None = None


def build_base_styles() -> dict[str, dict[str, str]]:
    """Return base rules exposing φ as a CSS custom property."""
    return {":root": {"--phi": format_number(PHI)}}


def register_base_utilities(
    sinks: Sinks,
    options: TokenOptions | Mapping[str, Any] | None = None,
) -> ThemeExtensionBundle:
    """Compute every token table and pass it to the host sinks.

    Args:
        sinks: Host callbacks.
        options: TokenOptions, a plugin options mapping, or None for defaults.

    Returns:
        The theme extension that was passed to ``extend_theme``.

    Raises:
        DomainError: If the options are invalid. No sink is called.
    """
    if not isinstance(options, TokenOptions):
        options = TokenOptions.from_mapping(options)

    base = build_base_styles()
    utilities = build_utilities(options)
    theme = build_theme_extension(options)

    if sinks.add_base is not None:
        sinks.add_base(base)
    for group, rules in utilities:
        logger.debug("Registering %d %s utilities", len(rules), group)
        sinks.add_utilities(rules)
    sinks.extend_theme(theme)

    logger.info(
        "Registered %d golden-ratio utilities (base %s)",
        len(utilities.selectors()),
        options.base_size,
    )
    return theme
