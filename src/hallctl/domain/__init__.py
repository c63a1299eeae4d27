"""Domain layer — value objects, format rules, and indices.

This layer depends only on stdlib and pydantic.
It must never import from parsing, config, output, or commands.
"""
