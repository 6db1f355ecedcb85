"""Employee payment processors."""
