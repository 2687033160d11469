"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
ASSETS_DIR = ROOT_DIR / "assets"

APP_TITLE = "Record Dashboard"

# Routes in navbar order; keys are stored in the ``page`` query parameter.
PAGES = {
    "home": "Home",
    "about": "About",
    "contact": "Contact",
    "dashboard": "Dashboard",
}
DEFAULT_PAGE = "home"

POKEMON_API_URL = os.getenv("RECORD_DASHBOARD_POKEMON_URL", "https://pokeapi.co/api/v2/pokemon")
DIRECTORY_API_URL = os.getenv("RECORD_DASHBOARD_DIRECTORY_URL", "https://jsonplaceholder.typicode.com/users")
TEAM_API_URL = os.getenv("RECORD_DASHBOARD_TEAM_URL", "https://randomuser.me/api/")
TEAM_API_SEED = os.getenv("RECORD_DASHBOARD_TEAM_SEED", "myfixedseed")
TEAM_API_PAGE = 1
TEAM_SIZE = 100

REQUEST_TIMEOUT_SECONDS = float(os.getenv("RECORD_DASHBOARD_TIMEOUT", "10"))
CACHE_TTL_SECONDS = 600

HOME_POKEMON_LIMIT = 12
DASHBOARD_PAGE_SIZE = 10
VISIBLE_PAGE_LABELS = 5

DATE_FORMAT = "%Y-%m-%d"

LOG_FORMAT_ENV = "RECORD_DASHBOARD_LOG_FORMAT"
LOG_LEVEL = os.getenv("RECORD_DASHBOARD_LOG_LEVEL", "INFO").upper()

DEFAULT_FILTER = "all"
FILTER_LABELS = {
    "all": "All",
    "male": "Male",
    "female": "Female",
    "age_under_40": "Age lower than 40",
    "age_under_40_male": "Age lower than 40 and Male",
    "age_under_20": "Age lower than 20",
}

CONTACT_FIELDS = [
    "first_name",
    "last_name",
    "company",
    "email",
    "area_code",
    "phone_number",
    "message",
]

CONTACT_LABELS = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "company": "Company",
    "email": "Email",
    "area_code": "Area Code",
    "phone_number": "Phone Number",
    "message": "Message",
}
