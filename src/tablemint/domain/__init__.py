"""Domain layer — identifiers, table references, and locator composition.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
