from __future__ import annotations

DIGITS = "0123456789"
SECRET_LENGTH = 4
MAX_ATTEMPTS = 10

FALLBACK_COMMENTARY = "The numbers don't lie, but I'm speechless right now."
UNAVAILABLE_COMMENTARY = "The Game Master is off duty: commentary service unavailable."
