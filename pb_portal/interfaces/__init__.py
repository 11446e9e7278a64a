"""
Abstract interfaces for the PB Portal.

These interfaces define the contracts that concrete implementations
must adhere to, so the backend can be swapped by configuration.

This package contains:
- Provider interfaces for storage and identity adapters
- Service interfaces for the data access facade
"""

from pb_portal.interfaces.providers import *
from pb_portal.interfaces.services import *
