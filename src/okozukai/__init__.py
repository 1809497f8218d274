"""Okozukai - personal budgeting backend."""
