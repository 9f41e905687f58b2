# TTL classes
TTL_SHORT = "short"
TTL_MEDIUM = "medium"
TTL_LONG = "long"
TTL_CLASSES = (TTL_SHORT, TTL_MEDIUM, TTL_LONG)

# Defaults (seconds)
DEFAULT_TTL_SHORT = 300
DEFAULT_TTL_MEDIUM = 1800
DEFAULT_TTL_LONG = 3600
DEFAULT_MAX_SIZE = 1000
DEFAULT_SWEEP_INTERVAL = 300

# Share of max_size evicted when the cache is full
EVICTION_RATIO = 0.1

# Error messages
ERROR_INVALID_TTL = "ttl must be positive"
ERROR_INVALID_TTL_ORDER = "ttl classes must satisfy short <= medium <= long"
ERROR_INVALID_MAX_SIZE = "max_size must be positive"
ERROR_INVALID_SWEEP_INTERVAL = "sweep_interval must be positive"
ERROR_UNKNOWN_TTL_CLASS = "unknown ttl class"

__all__ = [
    "TTL_SHORT",
    "TTL_MEDIUM",
    "TTL_LONG",
    "TTL_CLASSES",
    "DEFAULT_TTL_SHORT",
    "DEFAULT_TTL_MEDIUM",
    "DEFAULT_TTL_LONG",
    "DEFAULT_MAX_SIZE",
    "DEFAULT_SWEEP_INTERVAL",
    "EVICTION_RATIO",
    "ERROR_INVALID_TTL",
    "ERROR_INVALID_TTL_ORDER",
    "ERROR_INVALID_MAX_SIZE",
    "ERROR_INVALID_SWEEP_INTERVAL",
    "ERROR_UNKNOWN_TTL_CLASS",
]
