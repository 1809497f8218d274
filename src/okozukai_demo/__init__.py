"""Development demo data for Okozukai."""
