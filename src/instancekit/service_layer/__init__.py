"""Service layer for INSTANCEKIT.

Implements the application use-cases as query services: instance
configuration resolution and recipient sanitization. Talks to the outside
world only through the ports defined in `instancekit.interfaces`.

Dependency rule: may import `instancekit.domain` and `instancekit.interfaces`,
but not `instancekit.adapters` or `instancekit.entrypoints`.
"""

from .instance_config import InstanceConfig
from .mail_helper import MailHelper

__all__ = ["InstanceConfig", "MailHelper"]
