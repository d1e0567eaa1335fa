# Event codes attached to handler responses and log lines
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
TOO_MANY_URLS = 'TOO_MANY_URLS'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
SHORT_URL_DELETED = 'SHORT_URL_DELETED'
