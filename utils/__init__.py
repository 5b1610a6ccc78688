"""Stateless string and mapping helpers."""
