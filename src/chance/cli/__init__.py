"""Chance command-line interface."""
