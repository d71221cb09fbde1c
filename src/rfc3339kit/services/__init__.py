"""Service layer — entry points returning ParseResult.

Services may import from domain and parsing layers.
They must never import from commands, output, or config.
"""
