"""Configuration tree handling.

This package provides:
- types: Data structures of the compiled command tree
- schema: Declarative validation of the compiled JSON document
- loader: JSON -> validated, include-expanded command tree
- finder: Locating the compiled configuration of a command
"""
