# Validation errors: 1000-1999
# Not Found errors: 2000-2999
# Authorization errors: 3000-3999
# Authentication errors: 4000-4999

# External Service errors: 5000-5999
UNENGAGED_USER = 5001
MESSAGE_UNDELIVERABLE = 5002
MEDIA_UPLOAD_FAILED = 5003

# Rate Limit errors: 6000-6999

# Configuration errors: 7000-7999
MISSING_PREVIEW_PHONE_NUMBER_ID = 7001

# Internal errors: 8000-8999
EMPTY_STATUS_ERRORS = 8001
UNKNOWN_WEBHOOK_ERROR_CODE = 8002
