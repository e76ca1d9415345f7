"""Interfaces (application boundary) for INSTANCEKIT.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (record stores, property sources, user
directories). Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any other
`instancekit.*` modules. It may be imported by `instancekit.service_layer`,
`instancekit.adapters`, and `instancekit.bootstrap`.
"""
