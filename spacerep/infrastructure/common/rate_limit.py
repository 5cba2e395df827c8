"""Request rate limiting shared by the routers."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from spacerep.config import get_settings

LOGIN_RATE_LIMIT = "5/minute"
REGISTER_RATE_LIMIT = "5/minute"
REFRESH_RATE_LIMIT = "10/minute"
SUGGESTIONS_RATE_LIMIT = "10/minute"

limiter = Limiter(key_func=get_remote_address, enabled=get_settings().RATE_LIMIT_ENABLED)
