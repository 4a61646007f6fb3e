"""Outbound ports for the cache subsystem."""
