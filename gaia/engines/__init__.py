"""Engines - stack orchestration and module services."""
