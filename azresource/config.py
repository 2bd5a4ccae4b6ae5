"""
Externalized configuration: defaults, optional YAML file, environment.

Secrets are never hard-coded and never printed; ``Settings.redacted()`` is the
only form that should reach the console.
"""
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml
from azure.identity import AzureAuthorityHosts

DEFAULT_CONFIG_FILE = "azresource.yaml"
DEFAULT_REGION = "westus"

_ENV_VARS = {
    "tenant_id": "AZURE_TENANT_ID",
    "client_id": "AZURE_CLIENT_ID",
    "client_secret": "AZURE_CLIENT_SECRET",
    "subscription_id": "AZURE_SUBSCRIPTION_ID",
    "cloud": "AZURE_CLOUD",
    "region": "AZURE_REGION",
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class CloudEnvironment:
    name: str
    authority_host: str
    resource_manager: str

    @property
    def credential_scope(self) -> str:
        return f"{self.resource_manager}/.default"


CLOUDS: Dict[str, CloudEnvironment] = {
    "AzureCloud": CloudEnvironment(
        "AzureCloud", AzureAuthorityHosts.AZURE_PUBLIC_CLOUD, "https://management.azure.com"
    ),
    "AzureUSGovernment": CloudEnvironment(
        "AzureUSGovernment", AzureAuthorityHosts.AZURE_GOVERNMENT, "https://management.usgovcloudapi.net"
    ),
    "AzureChinaCloud": CloudEnvironment(
        "AzureChinaCloud", AzureAuthorityHosts.AZURE_CHINA, "https://management.chinacloudapi.cn"
    ),
}


@dataclass(frozen=True)
class Profile:
    tenant_id: str
    subscription_id: str
    environment: CloudEnvironment


@dataclass(frozen=True)
class Settings:
    tenant_id: str = ""
    client_id: str = ""
    client_secret: str = ""
    subscription_id: str = ""
    cloud: str = "AzureCloud"
    region: str = DEFAULT_REGION

    def __repr__(self) -> str:
        return f"Settings({self.redacted()})"

    def redacted(self) -> Dict[str, str]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        if out["client_secret"]:
            out["client_secret"] = "***"
        return out

    def validate(self) -> "Settings":
        missing = [
            _ENV_VARS[name]
            for name in ("tenant_id", "subscription_id")
            if not getattr(self, name)
        ]
        if self.client_secret and not self.client_id:
            missing.append(_ENV_VARS["client_id"])
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
        if self.cloud not in CLOUDS:
            raise ConfigError(
                f"Unknown cloud '{self.cloud}' (expected one of: {', '.join(sorted(CLOUDS))})"
            )
        return self

    def profile(self) -> Profile:
        return Profile(
            tenant_id=self.tenant_id,
            subscription_id=self.subscription_id,
            environment=CLOUDS[self.cloud],
        )


def _read_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file '{path}': {exc}") from exc

    if isinstance(data, dict) and data and "azure" not in data:
        raise ConfigError(f"Config file '{path}' has no top-level 'azure' key")
    section = data.get("azure", {}) if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigError(f"Config file '{path}' must contain an 'azure' mapping")

    known = set(_ENV_VARS)
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown keys in '{path}': {', '.join(unknown)}")
    return {k: str(v) for k, v in section.items() if v is not None}


def load_settings(
    config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None
) -> Settings:
    """
    Build Settings from defaults, then the YAML file, then the environment.

    An explicit ``config_file`` must exist; the default ``azresource.yaml`` is
    only read when present in the working directory.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    if config_file is not None:
        settings = replace(settings, **_read_file(config_file))
    elif os.path.exists(DEFAULT_CONFIG_FILE):
        settings = replace(settings, **_read_file(DEFAULT_CONFIG_FILE))

    overrides = {name: env[var] for name, var in _ENV_VARS.items() if env.get(var)}
    return replace(settings, **overrides)
