"""Employee payments Django app."""
