LOGIN_URL = "/api/admin/login"
LOGOUT_URL = "/api/admin/logout"
VERIFY_URL = "/api/admin/verify"
