"""
yggdrasilctl shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

_KNOWN_KEYS = (
    "YGGDRASILCTL_ENDPOINT",
    "YGGDRASILCTL_TIMEOUT_SECONDS",
    "YGGDRASILCTL_MAX_RESPONSE_BYTES",
    "YGGDRASILCTL_LOG",
)


def load_env():
    """Read KEY=value pairs from .env; known keys fall back to os.environ."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _KNOWN_KEYS:
        if key not in env and key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"
BUILD_NAME = "yggdrasilctl"

DEFAULT_ENDPOINT = "unix:///var/run/yggdrasil.sock"

# Table columns dropped unless --verbose is given.
HIDDEN_FIELDS = frozenset({"box_pub_key", "box_sig_key", "nodeinfo", "was_mtu_fixed"})

# Switch queue bound assumed when the daemon does not report one (4 MiB).
DEFAULT_MAX_QUEUE_SIZE = 4194304

LOG_BUFFER_LIMIT = 500

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

ENDPOINT = env.get("YGGDRASILCTL_ENDPOINT", "") or DEFAULT_ENDPOINT
TIMEOUT_SECONDS = max(0.0, _env_float("YGGDRASILCTL_TIMEOUT_SECONDS", 0.0))
MAX_RESPONSE_BYTES = _env_int("YGGDRASILCTL_MAX_RESPONSE_BYTES", 5_000_000)
LOG_ENABLED = _env_bool("YGGDRASILCTL_LOG", False)
