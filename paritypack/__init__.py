"""Implementation package for ParityKit."""
