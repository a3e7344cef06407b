"""Role names shared by routers, services and scripts."""

ADMIN = "admin"
MENTOR = "mentor"
MENTEE = "mentee"
USER = "user"

DEFAULT_SIGNUP_ROLE = MENTEE
ADMIN_MENTOR = (ADMIN, MENTOR)
