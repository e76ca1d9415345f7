"""Command-line interface for INSTANCEKIT."""
