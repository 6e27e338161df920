"""Testing fakes – in-memory doubles for routing ports."""
from mp_gridview.testing.fakes.routing import RecordingUrlGenerator, StaticUrlMatcher

__all__ = ["RecordingUrlGenerator", "StaticUrlMatcher"]
