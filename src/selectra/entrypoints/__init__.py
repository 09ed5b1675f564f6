"""Entrypoints (inbound adapters) for SELECTRA.

Expose the library to the outside world through the ``selectra`` CLI. Parse and
validate inputs, call the domain and codec functions, and present results.

Dependency rule: may import `selectra.domain`, `selectra.adapters` and
`selectra.config`; nothing imports this package.
"""
