"""timestats.config.defaults
=========================

Central place for small, stable default values used across the timestats
package. Logging defaults can be overridden via environment variables or an
external config file; the interval-kind names and text labels are part of the
dump format and are not meant to be overridden.

This module intentionally avoids importing from other timestats packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Logging ----
# Level applied to the shared "timestats" logger when nothing else is set.
TIMESTATS_DEFAULT_LOG_LEVEL = "INFO"
# Emit JSON lines by default; plain text is available for local debugging.
TIMESTATS_DEFAULT_LOG_JSON = True
# No log file unless configured.
TIMESTATS_DEFAULT_LOG_FILE = None
# Name of the shared base logger.
TIMESTATS_LOGGER_NAME = "timestats"


# ---- Interval kinds ----
# Present-to-present interval; the only kind used to derive averageFPS.
PRESENT_TO_PRESENT = "present2present"
# Other interval kinds recorded by the compositor's collector.
POST_TO_PRESENT = "post2present"
ACQUIRE_TO_PRESENT = "acquire2present"
LATCH_TO_PRESENT = "latch2present"
DESIRED_TO_PRESENT = "desired2present"
POST_TO_ACQUIRE = "post2acquire"


# ---- Dump text labels ----
GLOBAL_DUMP_HEADER = "SurfaceFlinger TimeStats:"
LAYER_SECTION_HEADER = "TimeStats for each layer is as below:"


__all__ = [
    "TIMESTATS_DEFAULT_LOG_LEVEL",
    "TIMESTATS_DEFAULT_LOG_JSON",
    "TIMESTATS_DEFAULT_LOG_FILE",
    "TIMESTATS_LOGGER_NAME",
    "PRESENT_TO_PRESENT",
    "POST_TO_PRESENT",
    "ACQUIRE_TO_PRESENT",
    "LATCH_TO_PRESENT",
    "DESIRED_TO_PRESENT",
    "POST_TO_ACQUIRE",
    "GLOBAL_DUMP_HEADER",
    "LAYER_SECTION_HEADER",
]
