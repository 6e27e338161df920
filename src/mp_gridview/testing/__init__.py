"""Testing – in-memory doubles for the routing ports."""
