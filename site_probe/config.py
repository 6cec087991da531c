# === FILE: site_probe/config.py ===
"""
Loading and validation of the SiteProbe configuration.
The schema is a Pydantic model; every field has a default, so an empty
config (or no config file at all) yields the stock behaviour.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProbeConfig(BaseModel):
    """Settings for one batch run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: Optional[str] = Field(
        None, min_length=1, description="User-Agent header; None keeps the client default."
    )
    follow_redirects: bool = Field(True, description="Follow HTTP redirects when fetching titles.")
    max_redirects: int = Field(10, ge=0, description="Redirect hop limit when following redirects.")
    verify_ssl: bool = Field(True, description="Verify TLS certificates.")
    raise_for_status: bool = Field(
        False, description="Treat HTTP status >= 400 as a fetch failure."
    )
    default_scheme: Literal["https", "http"] = Field(
        "https", description="Scheme prepended to tokens without one."
    )
    host_prefix: str = Field("www.", description="Host label prepended to tokens without a scheme.")
    placeholder: str = Field("N/A", min_length=1, description="Value for fields whose lookup failed.")
    sentinel: str = Field("done", min_length=1, description="Input line that ends URL collection.")

    @field_validator("sentinel", "placeholder", mode="before")
    def _strip(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_CONFIG_PATH = Path("configs/site_probe.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ProbeConfig:
    """
    Read YAML or JSON and return a validated ProbeConfig.

    With ``path=None`` the default file is used when it exists, otherwise the
    built-in defaults. An explicit path that does not exist raises
    FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return ProbeConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return ProbeConfig(**data)


__all__ = ["ProbeConfig", "load_config", "DEFAULT_CONFIG_PATH"]
