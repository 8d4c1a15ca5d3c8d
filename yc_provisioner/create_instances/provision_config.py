import json
import tomllib
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ConfigurationError


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ImageSelector(_FrozenModel):
    family: str
    # 镜像所在的 folder，公共镜像为 standard-images
    folder_family_id: str


class ResourcesSpec(_FrozenModel):
    # bytes
    memory: int
    cores: int


class DiskSpec(_FrozenModel):
    type_id: str
    # bytes
    size: int


class BootDiskSpec(_FrozenModel):
    auto_delete: bool
    disk_spec: DiskSpec


class InstanceResources(_FrozenModel):
    image: ImageSelector
    name: str
    resources_spec: ResourcesSpec
    boot_disk_spec: BootDiskSpec
    zone_id: str
    platform_id: str
    subnet_id: str
    assign_public_ip: bool = True


class ProvisionConfig(_FrozenModel):
    folder_id: str
    username: str
    resources: InstanceResources
    metadata: Dict[str, str] = {}
    labels: Dict[str, str] = {}


def parse_provision_config(data: Dict[str, Any]) -> ProvisionConfig:
    try:
        return ProvisionConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid provision config: {e}", step="config") from e


def load_provision_config(config_path: str) -> ProvisionConfig:
    """Load a descriptor from a JSON file, or TOML when the suffix is ``.toml``."""
    path = Path(config_path)
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, "r") as f:
                data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}", step="config") from e
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}", step="config") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be an object: {config_path}", step="config")

    return parse_provision_config(data)
