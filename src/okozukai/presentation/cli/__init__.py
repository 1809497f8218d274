"""Okozukai command line interface."""
