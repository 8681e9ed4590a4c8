"""Log file format constants and environment variable names."""

# Log file
DEFAULT_LOG_FILENAME = "ormlogs.log"
LINE_SEPARATOR = "\r\n"
LOG_ENCODING = "utf-8"

# Line bodies
PARAMETERS_MARKER = " -- PARAMETERS: "

# Configuration string accepted for the "log everything" sentinel
ALL_EVENTS_OPTION = "all"

# Environment
APP_ROOT_PATH_ENV = "APP_ROOT_PATH"
