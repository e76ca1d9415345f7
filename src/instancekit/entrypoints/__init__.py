"""Entrypoints (inbound adapters) for INSTANCEKIT.

Expose the utilities to operators: CLI commands. Parse inputs, call the
composition root, and present results.

Dependency rule: may import `instancekit.bootstrap` and
`instancekit.service_layer`; avoid importing `instancekit.adapters` directly.
"""
