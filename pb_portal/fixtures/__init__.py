from pb_portal.fixtures.demo_data import DEMO_APPS, DEMO_USERS
