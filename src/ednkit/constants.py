# topmark:header:start
#
#   project      : EDNKit
#   file         : constants.py
#   file_relpath : src/ednkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    EDNKIT_VERSION: str = get_version("ednkit")
except PackageNotFoundError:  # running from a source checkout
    EDNKIT_VERSION = "unknown"

# Environment variable consulted by `ednkit.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "EDNKIT_LOG_LEVEL"

# Tagged literal names emitted by the encoder.
TAG_BASE64: str = "base64"
TAG_INST: str = "inst"
TAG_UUID: str = "uuid"
