"""Shared pytest configuration."""

pytest_plugins = ["mp_crypto.testing.fixtures"]
