"""Employee payments settings."""
