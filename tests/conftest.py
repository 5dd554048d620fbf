"""Shared pytest fixtures for stubwire tests."""

import pytest

from stubwire.bindings import BindingsExtractor
from stubwire.builder import Builder
from tests.helpers import RecordingStandIns


@pytest.fixture()
def extractor() -> BindingsExtractor:
    """BindingsExtractor instance."""
    return BindingsExtractor()


@pytest.fixture()
def stand_ins() -> RecordingStandIns:
    """Stand-in provider recording requested types."""
    return RecordingStandIns()


@pytest.fixture()
def builder(stand_ins: RecordingStandIns) -> Builder:
    """Builder wired to the recording stand-in provider."""
    return Builder(stand_ins=stand_ins)
