"""Aggregation, filtering, export and workflow services."""
