"""
Service implementations for the PB Portal.

These services implement the data access interface defined in
pb_portal.interfaces.services and the portal's business rules.
"""

from pb_portal.services.lifecycle import *
from pb_portal.services.scoring import *
from pb_portal.services.local_access import *
from pb_portal.services.remote_access import *
from pb_portal.services.seeding import *
