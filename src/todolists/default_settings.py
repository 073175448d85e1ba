# Default settings for todolists

TODOLISTS_SESSION_KEY = "lists"
TODOLISTS_MIN_NAME_LENGTH = 1
TODOLISTS_MAX_NAME_LENGTH = 100

# header that marks a request as sent from a script rather than a page load
TODOLISTS_ASYNC_HEADER = "X-Requested-With"
TODOLISTS_ASYNC_HEADER_VALUE = "XMLHttpRequest"

TODOLISTS_FLASH_ERROR_KEY = "error"
TODOLISTS_FLASH_SUCCESS_KEY = "success"
