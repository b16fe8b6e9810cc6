# API Route Constants

# Base API
API_BASE = '/api'

# Movie routes
MOVIE_BASE = f'{API_BASE}/movies'
MOVIE_LIST = MOVIE_BASE
MOVIE_CREATE = MOVIE_BASE
MOVIE_GET = f'{MOVIE_BASE}/{{movie_id}}'
MOVIE_SHOWS = f'{MOVIE_BASE}/{{movie_id}}/shows'
MOVIE_SHOW_GET = f'{MOVIE_BASE}/{{movie_id}}/shows/{{show_id}}'
MOVIE_SHOW_SEATS = f'{MOVIE_BASE}/{{movie_id}}/shows/{{show_id}}/seats'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_BY_CUSTOMER = f'{BOOKING_BASE}/customer/{{customer_name}}'
BOOKING_COUPONS = f'{BOOKING_BASE}/coupons'
BOOKING_COUPON_VALIDATE = f'{BOOKING_BASE}/coupons/{{coupon_code}}/validate'
BOOKING_STATS = f'{BOOKING_BASE}/stats'

# System routes
SYSTEM_BASE = f'{API_BASE}/system'
SYSTEM_STATUS = f'{SYSTEM_BASE}/status'
SYSTEM_HEALTH = f'{SYSTEM_BASE}/health'
SYSTEM_INFO = f'{SYSTEM_BASE}/info'
SYSTEM_STATS = f'{SYSTEM_BASE}/stats'
SYSTEM_INIT_DATA = f'{SYSTEM_BASE}/init-data'

# Web pages
PAGE_HOME = '/'
PAGE_MOVIES = '/movies'
PAGE_BOOKING = '/booking'
PAGE_MY_BOOKINGS = '/my-bookings'
PAGE_CANCEL_BOOKING = '/my-bookings/{booking_id}/cancel'
