# Naming constants
PAD_WIDTH = 3
PAD_CHAR = "0"
PREFIX_SEPARATOR = "-"
COLLISION_SEPARATOR = "_"

LOGGER_NAME = "flatpad"
CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3
