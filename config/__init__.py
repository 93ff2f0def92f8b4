from .log import get_logger
from .settings import (
    CONDENSED_PREFIX,
    EXPORT_SHEET_NAME,
    HEADERS_PREFIX,
    LOG_LEVEL,
    MASTER_PREFIX,
    MAX_FILE_SIZE_MB,
    MAX_SHEET_ROWS,
    OUTPUT_DIR_NAME,
    SUPPORTED_EXTENSIONS,
    TIMESTAMP_FORMAT,
)
