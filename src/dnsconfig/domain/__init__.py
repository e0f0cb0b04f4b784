"""Domain layer — services, namespaces, record parsing, derivation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
