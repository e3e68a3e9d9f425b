# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_REGISTER = f'{AUTH_BASE}/register'
AUTH_AUTHENTICATE = f'{AUTH_BASE}/authenticate'
AUTH_REFRESH_TOKEN = f'{AUTH_BASE}/refresh-token'
AUTH_LOGOUT = f'{AUTH_BASE}/logout'

# User routes
USER_BASE = f'{API_BASE}/users'
USER_ME = f'{USER_BASE}/me'
USER_GET = f'{USER_BASE}/{{user_id}}'
USER_BY_ROLE = f'{USER_BASE}/role/{{role}}'
USER_CHANGE_PASSWORD = f'{USER_BASE}/{{user_id}}/change-password'

# Flight routes
FLIGHT_BASE = f'{API_BASE}/flights'
FLIGHT_GET = f'{FLIGHT_BASE}/{{flight_id}}'
FLIGHT_SEARCH = f'{FLIGHT_BASE}/search'

# Ticket routes
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_MY = f'{TICKET_BASE}/my-tickets'
TICKET_BY_NUMBER = f'{TICKET_BASE}/number/{{ticket_number}}'
TICKET_BY_USER = f'{TICKET_BASE}/user/{{user_id}}'
TICKET_BY_FLIGHT = f'{TICKET_BASE}/flight/{{flight_id}}'
TICKET_BY_STATUS = f'{TICKET_BASE}/status/{{status}}'
TICKET_DATE_RANGE = f'{TICKET_BASE}/date-range'
TICKET_CONFIRM = f'{TICKET_BASE}/{{ticket_id}}/confirm'
TICKET_CANCEL = f'{TICKET_BASE}/{{ticket_id}}/cancel'
TICKET_PDF = f'{TICKET_BASE}/{{ticket_id}}/pdf'

# Notification routes
NOTIFICATION_BASE = f'{API_BASE}/notifications'
NOTIFICATION_UNSEEN = f'{NOTIFICATION_BASE}/unseen'
NOTIFICATION_DATE_RANGE = f'{NOTIFICATION_BASE}/date-range'
NOTIFICATION_MARK_SEEN = f'{NOTIFICATION_BASE}/{{notification_id}}/mark-seen'
NOTIFICATION_MARK_ALL_SEEN = f'{NOTIFICATION_BASE}/mark-all-seen'
NOTIFICATION_BY_TYPE = f'{NOTIFICATION_BASE}/type/{{notification_type}}'
NOTIFICATION_BY_USER = f'{NOTIFICATION_BASE}/user/{{user_id}}'
NOTIFICATION_BY_TICKET = f'{NOTIFICATION_BASE}/ticket/{{ticket_id}}'

# Date-range query parameter format
DATE_TIME_FORMAT = '%Y-%m-%dT%H:%M:%S'
