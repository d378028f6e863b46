GUESTS_URL = "/api/guests"
GUEST_STATS_URL = "/api/guests/stats"
EXPORT_GUESTS_URL = "/api/guests/export"
