"""Bundled service providers."""
