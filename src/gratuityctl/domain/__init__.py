"""Domain layer — gratuity rules, value types, and money helpers.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
