"""Domain layer — calendar arithmetic and value types.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
