"""Application layer - status aggregation pipeline."""
