"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from unifi_cloud.client.errors import ConfigurationError
from unifi_cloud.config.constants import (
    CONFIG_FILE,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_PROFILE,
)
from unifi_cloud.config.models import CLIConfig, ClientProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves client profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        data = tomllib.loads(self.config_path.read_text())
        profiles: dict[str, ClientProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ClientProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"})
                # Keep defaults out of the file
                if prof_dict.get("base_url") == DEFAULT_BASE_URL:
                    del prof_dict["base_url"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                if prof_dict.get("debug") is False:
                    del prof_dict["debug"]
                data["profiles"][name] = prof_dict
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: ClientProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ClientProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        debug: bool | None = None,
    ) -> ClientProfile:
        """Resolve client settings.

        Precedence: CLI flags > env vars > config profile > defaults.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        resolved_key = (
            api_key or os.environ.get(ENV_API_KEY) or (profile.api_key if profile else None)
        )
        resolved_url = (
            base_url
            or os.environ.get(ENV_BASE_URL)
            or (profile.base_url if profile else DEFAULT_BASE_URL)
        )

        if not resolved_key:
            raise ConfigurationError(
                "No API key configured. Use 'unifi-cloud config add' or set "
                f"{ENV_API_KEY} or pass --api-key."
            )

        return ClientProfile(
            name=profile.name if profile else "cli",
            api_key=resolved_key,
            base_url=resolved_url,
            timeout=timeout or (profile.timeout if profile else DEFAULT_TIMEOUT),
            debug=debug if debug is not None else (profile.debug if profile else False),
        )
