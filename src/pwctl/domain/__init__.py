"""Domain layer — alphabet, generator, policy, and error types.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
