"""Adapters (infrastructure) for INSTANCEKIT.

Provide concrete implementations of the ports in `instancekit.interfaces`
(record stores, property sources, user directories), plus persistence
mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `instancekit.interfaces` and
`instancekit.domain`; those packages must not import this one.
"""
