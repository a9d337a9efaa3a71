# Log events / error codes
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
STORAGE_ERROR = 'STORAGE_ERROR'
DEADLINE_EXCEEDED = 'DEADLINE_EXCEEDED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
