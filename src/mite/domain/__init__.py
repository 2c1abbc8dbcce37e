"""
Domain Layer - Core Geometry Types

This layer contains the value objects that make up the mite geometry model.
It is independent of configuration, logging, and presentation concerns.
"""
