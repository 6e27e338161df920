"""Application layer – pagination, sorting and the routing ports they consume."""
