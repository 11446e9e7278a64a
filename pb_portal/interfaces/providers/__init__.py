from pb_portal.interfaces.providers.data_storage import *
from pb_portal.interfaces.providers.identity import *
from pb_portal.interfaces.providers.key_value import *
