"""
Fixed settings of the library.

Everything here is a plain constant. Functions that depend on a setting
take it as an argument defaulting to the constant, so tests (and callers
talking to a mirror of the API) can substitute their own value.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

BASE_URL = "https://api.mindenit.tech"

GROUPS_PATH = "/lists/groups"
TEACHERS_PATH = "/teachers"
LECTURE_ROOMS_PATH = "/auditories"
SCHEDULE_PATH = "/schedule/{resource_type}/{resource_id}"

# seconds, passed to every requests.get call
REQUEST_TIMEOUT = 30


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

# The university is in Kharkiv; all periods are expressed in this zone.
TIMEZONE_NAME = "Europe/Kyiv"
DEFAULT_TIMEZONE = ZoneInfo(TIMEZONE_NAME)
