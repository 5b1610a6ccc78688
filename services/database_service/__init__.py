"""Database engine and session wiring."""
