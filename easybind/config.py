"""Module: easybind.config

Date: 2026-10-19

Library-level configuration: key path syntax and logging settings.
"""

# =====================================
# KEY PATH SYNTAX
# =====================================

# Every key path must start with this segment, e.g. "root.house.name"
ROOT_KEY = "root"

KEY_PATH_SEPARATOR = "."

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# File logging (off by default, the library normally logs through the host app)
LOG_TO_FILE = False
LOG_FILE_PATH = "logs/easybind.log"
LOG_FILE_LEVEL = "DEBUG"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 3

# Hop install/teardown messages are tagged dev_only and kept out of the console
SHOW_DEV_ONLY_IN_CONSOLE = False
