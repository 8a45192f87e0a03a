"""Configuration, database and service wiring."""
