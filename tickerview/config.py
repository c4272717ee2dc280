import os

from tickerview.paths import data_path

DATA_SOURCE   = os.getenv("TICKERVIEW_DATA_SOURCE", str(data_path("data.csv")))
LOG_LEVEL     = os.getenv("TICKERVIEW_LOG_LEVEL", "INFO")
CACHE_TTL     = int(os.getenv("TICKERVIEW_CACHE_TTL", str(6 * 60 * 60)))

# Accepted header names after normalisation (lower case, "_raw" stripped)
COLUMN_ALIASES = {
    "date":  ("date", "day", "timestamp"),
    "key":   ("ticker", "symbol", "key", "instrument"),
    "price": ("price", "close", "close_price", "adj_close"),
}

# Window constraints, in whole calendar months
DEFAULT_LOOKBACK_MONTHS = 12
MIN_WINDOW_MONTHS       = 1
MAX_WINDOW_MONTHS       = 60
