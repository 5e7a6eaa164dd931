"""Domain layer: the SOLID snippets as importable classes and functions.

Good variants live in the top-level modules, their flawed counterparts in
:mod:`solidctl.domain.antipatterns`. This package must never import from
services, plugins, output, or commands.
"""
