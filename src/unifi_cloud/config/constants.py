"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "unifi-cloud"
APP_AUTHOR = "ArtOfWiFi"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_KEY = "UNIFI_API_KEY"
ENV_BASE_URL = "UNIFI_BASE_URL"
ENV_PROFILE = "UNIFI_PROFILE"

# API defaults
DEFAULT_BASE_URL = "https://api.ui.com"
DEFAULT_TIMEOUT = 10
API_PREFIX = "/ea"
API_KEY_HEADER = "X-API-KEY"
