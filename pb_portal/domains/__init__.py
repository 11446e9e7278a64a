"""
Domain models for the PB Portal.

This package contains the business objects and value types of the
portal: users, applications, scores and settings.
"""

from pb_portal.domains.base import *
from pb_portal.domains.users import *
from pb_portal.domains.applications import *
from pb_portal.domains.scores import *
from pb_portal.domains.settings import *
from pb_portal.domains.criteria import *
