"""Reusable pure-function libraries (trade analytics, risk sizing)."""
