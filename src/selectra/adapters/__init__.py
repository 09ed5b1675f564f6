"""Adapters (infrastructure) for SELECTRA.

Bind domain objects to concrete technologies; currently the JSON text codec.

Dependency rule: may import `selectra.domain` and `selectra.config`; the domain
must not import this package.
"""
