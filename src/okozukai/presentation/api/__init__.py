"""Okozukai REST API."""
