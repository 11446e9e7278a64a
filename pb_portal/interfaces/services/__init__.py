from pb_portal.interfaces.services.data_access import *
