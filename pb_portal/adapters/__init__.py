"""
Adapters for external systems and services.

These adapters implement the interfaces defined in pb_portal.interfaces
and provide concrete implementations for interacting with storage and
identity backends.
"""
