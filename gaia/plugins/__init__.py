"""Plugins - pluggable integrations with external providers."""
