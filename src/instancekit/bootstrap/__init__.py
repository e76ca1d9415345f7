"""Bootstrap (composition root) for INSTANCEKIT.

Assembles the application at runtime: opens the database, wires concrete
adapters to the service-layer query objects, and reads the process-wide
configuration (instance name, mail whitelist, exempt groups).

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `instancekit.adapters`, `instancekit.service_layer`,
  `instancekit.interfaces`, `instancekit.domain`, and `instancekit.config`.
- Inner layers must not import `instancekit.bootstrap`.
"""

from .bootstrap import QueryContainer, bootstrap_queries, build_queries

__all__ = ["QueryContainer", "bootstrap_queries", "build_queries"]
