# Log events / error codes
INVALID_JSON = 'INVALID_JSON'
INVALID_URL = 'INVALID_URL'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
STORAGE_ERROR = 'STORAGE_ERROR'
DEADLINE_EXCEEDED = 'DEADLINE_EXCEEDED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
