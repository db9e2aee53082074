USER_EMAIL = "viewer@gmail.com"
ADMIN_EMAIL = "boss@admin.com"
PASSWORD = "secret-pass"
