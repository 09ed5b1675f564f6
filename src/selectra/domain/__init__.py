"""Domain layer for SELECTRA.

Contains the value objects and builders themselves: shapes, the CSS selector
builder, and the error hierarchy they raise. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `selectra.adapters` or `selectra.entrypoints`.
"""
