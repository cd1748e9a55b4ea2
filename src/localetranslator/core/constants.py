"""Default limits of the remote translation service."""

from __future__ import annotations

import math

# Longest request body the provider accepts, in characters.
MAX_REQUEST_LENGTH = 2000

# Requests the provider tolerates per second; also the window size.
MAX_REQUESTS_PER_SECOND = 5

# Pacing between windows and between languages, in seconds. Slightly over
# one second so consecutive windows never land in the same rate bucket.
INTER_WINDOW_DELAY = 1.1
INTER_LANGUAGE_DELAY = 1.1

# No ceiling: quota tracking disabled.
UNLIMITED_QUOTA = math.inf

LOCALE_FILE_ENCODING = "utf-8"
