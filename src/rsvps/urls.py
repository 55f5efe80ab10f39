HEALTH_URL = "/api/health"
SUBMIT_RSVP_URL = "/api/rsvp"
ADMIN_RSVPS_URL = "/api/admin/rsvps"
ADMIN_RSVPS_CSV_URL = "/api/admin/rsvps.csv"
INVITE_ICS_URL = "/api/invite.ics"
ADMIN_PAGE_URL = "/admin"
