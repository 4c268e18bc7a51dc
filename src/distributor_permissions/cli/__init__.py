"""Command-line interface for distributor-permissions."""
