"""Assembly of token tables into host utility and theme data."""

from goldentokens.plugin.registration import Sinks, build_base_styles, register_base_utilities
from goldentokens.plugin.theme import THEME_KEYS, build_theme_extension
from goldentokens.plugin.utilities import UtilityRegistrationBatch, build_utilities

__all__ = [
    "Sinks",
    "THEME_KEYS",
    "UtilityRegistrationBatch",
    "build_base_styles",
    "build_theme_extension",
    "build_utilities",
    "register_base_utilities",
]
