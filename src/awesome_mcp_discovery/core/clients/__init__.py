"""Upstream document clients."""
