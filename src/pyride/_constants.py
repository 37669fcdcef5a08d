"""Internal constants shared across the library."""

BASE_URL = "http://localhost:5000"
USER_AGENT = "pyride/0"

AUTH_FAILURE_STATUSES: frozenset[int] = frozenset({401, 403})

# ------------------------------------------------------------------
# API endpoints
# ------------------------------------------------------------------

DRIVER_PROFILE_ENDPOINT = "/api/drivers/me"
CLIENT_PROFILE_ENDPOINT = "/api/clients/me"
ADMIN_PROFILE_ENDPOINT = "/api/admin/me"
DRIVER_RATINGS_ENDPOINT = "/api/ratings/driver/{driver_id}"
ROUTE_CALCULATE_ENDPOINT = "/api/routes/calculate"

# ------------------------------------------------------------------
# Navigation targets
# ------------------------------------------------------------------

DRIVER_HOME_ROUTE = "/driver/dashboard"
CLIENT_HOME_ROUTE = "/client/dashboard"
ADMIN_HOME_ROUTE = "/admin/dashboard"
DEFAULT_ROUTE = "/"

# ------------------------------------------------------------------
# Ratings
# ------------------------------------------------------------------

MIN_STARS = 1
MAX_STARS = 5
