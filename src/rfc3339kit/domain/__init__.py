"""Domain layer — value types, bounded fields, and calendar rules.

This layer depends only on stdlib and pydantic.
It must never import from parsing, services, commands, or config.
"""
