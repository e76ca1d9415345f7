"""Domain layer for INSTANCEKIT.

Contains the pure business rules (recipient parsing and rewriting) and the
small read models shared across layers. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `instancekit.adapters` or
`instancekit.entrypoints`.
"""
