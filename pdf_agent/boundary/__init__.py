"""Boundary layer: clients for storage, vector index and model providers."""
