"""Service layer: demo runners and lookups returning ServiceResult.

Services may import from domain, config, and plugins.
They must never import from commands or output.
"""
