"""INSTANCEKIT

Platform-hosted business utilities for a CRM-style platform: a two-tier
instance configuration lookup with fallback to global defaults, and an
outbound-email sanitizer that keeps non-production environments from
delivering mail to real users.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
