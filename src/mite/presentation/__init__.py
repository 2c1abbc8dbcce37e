"""Presentation layer: serialization models and the command-line interface."""
