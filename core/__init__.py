"""Host configuration and logging setup."""
