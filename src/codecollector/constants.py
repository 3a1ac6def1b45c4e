from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Prefix of the line written before every collected file.
FILE_PATH_MARKER: str = '[FILE_PATH] '

# Appended after every collected file body.
BLOCK_SEPARATOR: bytes = b'\n\n'

DEFAULT_EXTENSION: str = 'java'
DEFAULT_OUTPUT: str = 'collected_code.txt'

ENV_JSON_LOGS: str = 'CODECOLLECT_JSON_LOGS'
ENV_LOG_LEVEL: str = 'CODECOLLECT_LOG_LEVEL'
ENV_TRACE_IO: str = 'CODECOLLECT_TRACE_IO'
