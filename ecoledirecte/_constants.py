"""Wire-level constants for the EcoleDirecte API."""

API_URL = "https://api.ecoledirecte.com"
API_VERSION = "4.75.0"

TOKEN_HEADER = "X-Token"

DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/x-www-form-urlencoded",
    "User-Agent": "EDMOBILE",
}

# The service answers malformed base URLs with an HTML placeholder page.
LOADING_PAGE_MARKER = "<title>Loading...</title>"

ENV_API_URL = "ECOLEDIRECTE_API_URL"
ENV_API_VERSION = "ECOLEDIRECTE_API_VERSION"
ENV_TOKEN = "ECOLEDIRECTE_TOKEN"
ENV_STUDENT_ID = "ECOLEDIRECTE_STUDENT_ID"
