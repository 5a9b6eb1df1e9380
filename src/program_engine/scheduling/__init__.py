"""Weekly schedule templates."""
