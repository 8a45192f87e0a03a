"""Concrete adapters for the domain protocols."""
