"""Command-line interface for ParityKit."""
