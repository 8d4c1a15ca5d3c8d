from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class ImageInfo:
    image_id: str
    image_name: str = ""
    family: str = ""


@dataclass(frozen=True)
class BootDiskRequest:
    auto_delete: bool
    type_id: str
    size: int
    image_id: str


@dataclass(frozen=True)
class NetworkInterfaceRequest:
    subnet_id: str
    assign_public_ip: bool


@dataclass(frozen=True)
class CreationRequest:
    folder_id: str
    name: str
    zone_id: str
    platform_id: str
    memory: int
    cores: int
    boot_disk: BootDiskRequest
    network_interface: NetworkInterfaceRequest
    labels: Dict[str, str] = field(default_factory=dict)
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationHandle:
    operation_id: str
    instance_id: Optional[str] = None
    description: str = ""
