"""Option reconciliation feature package."""
