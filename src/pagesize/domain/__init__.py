"""Domain layer: the PageSize value type and its named presets.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, or config.
"""
