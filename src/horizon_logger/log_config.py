"""
Module: log_config.py
Location: src/horizon_logger/

Fixed settings shared by the console logger and its history buffer.
"""

HISTORY_CAPACITY = 1000
# Maximum number of LogEntry records retained in memory.
# The oldest entry is evicted once this is exceeded.

LABEL_WIDTH = 7
# Width of the centered severity label ("DEBUG", " INFO  ", " CRIT  ").

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
# Second-resolution part of the timestamp; milliseconds are appended
# separately (truncated, never rounded).
