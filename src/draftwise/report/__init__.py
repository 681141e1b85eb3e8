"""Human-readable reporting commands."""
