"""Shared fixtures for the mp-gridview test-suite."""

from __future__ import annotations

import pytest

from mp_gridview.testing.fakes import RecordingUrlGenerator, StaticUrlMatcher


@pytest.fixture()
def url_generator() -> RecordingUrlGenerator:
    return RecordingUrlGenerator()


@pytest.fixture()
def url_matcher() -> StaticUrlMatcher:
    return StaticUrlMatcher("user/index")
