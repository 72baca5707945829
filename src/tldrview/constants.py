"""Literal constants used by tldrview."""

APP_NAME = "tldrview"

DEFAULT_INDEX_URL = "https://tldr.sh/assets/index.json"
DEFAULT_PAGES_URL = "https://raw.githubusercontent.com/tldr-pages/tldr/main/pages"
CONTRIBUTE_URL = "https://github.com/tldr-pages/tldr"

PAGE_SUFFIX = ".md"
LIST_INDENT = "    "

USER_AGENT = f"{APP_NAME}/1.0 (+https://github.com/tldr-pages/tldr)"

# Environment variables read by config.load_settings().
ENV_INDEX_URL = "TLDRVIEW_INDEX_URL"
ENV_PAGES_URL = "TLDRVIEW_PAGES_URL"
ENV_PLATFORM = "TLDRVIEW_PLATFORM"
ENV_LOG_FILE = "TLDRVIEW_LOG"
ENV_NO_COLOR = "NO_COLOR"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PAGE_ERROR = 1
EXIT_INDEX_ERROR = 2
# Reused from HTTP semantics; the OS reports it modulo 256.
EXIT_NOT_FOUND = 404

INDEX_ERROR_MESSAGE = "Error occurred while parsing json."
PAGE_ERROR_MESSAGE = "Error loading page content."
UNKNOWN_OS_MESSAGE = "Unknown os."
NOT_FOUND_MESSAGE = "This page doesn't exist yet!"
CONTRIBUTE_PREFIX = "Submit new pages here: "
