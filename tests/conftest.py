"""Test fixtures for goldentokens tests."""

from collections.abc import Callable, Mapping
from typing import Any

import pytest

from goldentokens.plugin.registration import Sinks


class RecordingSinks:
    """Collects every call the generator makes to the host sinks."""

    def __init__(self) -> None:
        self.base: list[Mapping[str, Any]] = []
        self.utilities: list[Mapping[str, Any]] = []
        self.themes: list[Mapping[str, Any]] = []

    def as_sinks(self, with_base: bool = True) -> Sinks:
        return Sinks(
            add_utilities=self.utilities.append,
            extend_theme=self.themes.append,
            add_base=self.base.append if with_base else None,
        )

    @property
    def call_count(self) -> int:
        return len(self.base) + len(self.utilities) + len(self.themes)


@pytest.fixture
def recorder() -> RecordingSinks:
    """Fresh recording sinks for one test."""
    return RecordingSinks()


@pytest.fixture
def make_recorder() -> Callable[[], RecordingSinks]:
    """Factory for tests that need more than one set of recording sinks."""
    return RecordingSinks
