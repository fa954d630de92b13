# Validation (1000-1999)
INVALID_MEDIA_TYPE = 1001
MISSING_FILENAME = 1002
MISSING_READER = 1003
MISSING_MEDIA_ID = 1004
MISSING_WRITER = 1005
MISSING_NEWS = 1006
MISSING_VIDEO = 1007

# External Service (5000-5999)
UNEXPECTED_HTTP_STATUS = 5001

# Configuration (7000-7999)
MISSING_APP_CREDENTIALS = 7001
