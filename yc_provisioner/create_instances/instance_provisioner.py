from typing import Callable, Dict

from loguru import logger

from ..errors import ImageNotFoundError
from ..provider_interface import IComputeClient
from ..yandex_provider.client_factory import YandexClient
from .credentials import Credentials
from .metadata import render_metadata
from .provision_config import ProvisionConfig
from .types import BootDiskRequest, CreationRequest, ImageInfo, NetworkInterfaceRequest, OperationHandle


def build_creation_request(config: ProvisionConfig, image: ImageInfo, metadata: Dict[str, str]) -> CreationRequest:
    res = config.resources
    return CreationRequest(
        folder_id=config.folder_id,
        name=res.name,
        zone_id=res.zone_id,
        platform_id=res.platform_id,
        memory=res.resources_spec.memory,
        cores=res.resources_spec.cores,
        boot_disk=BootDiskRequest(
            auto_delete=res.boot_disk_spec.auto_delete,
            type_id=res.boot_disk_spec.disk_spec.type_id,
            size=res.boot_disk_spec.disk_spec.size,
            image_id=image.image_id,
        ),
        network_interface=NetworkInterfaceRequest(
            subnet_id=res.subnet_id,
            assign_public_ip=res.assign_public_ip,
        ),
        labels=dict(config.labels),
        metadata=metadata,
    )


def provision(
    config: ProvisionConfig,
    credentials: Credentials,
    client_factory: Callable[[str], IComputeClient] = YandexClient,
) -> OperationHandle:
    client = client_factory(credentials.iam_token)
    image_selector = config.resources.image

    image = client.get_latest_image_by_family(image_selector.family, image_selector.folder_family_id)
    if not image.image_id:
        raise ImageNotFoundError(
            f"No image for family {image_selector.family} in folder {image_selector.folder_family_id}", step="resolve_image")
    logger.info(f"Resolved image family {image_selector.family}: image_id={image.image_id}")

    metadata = render_metadata(config.metadata, config.username, credentials.ssh_public_key)
    request = build_creation_request(config, image, metadata)

    logger.info(f"Creating instance {request.name} in {request.folder_id}/{request.zone_id}: "
                f"platform={request.platform_id}, cores={request.cores}, memory={request.memory}")
    handle = client.create_instance(request)

    logger.success(f"Instance {request.name} create accepted: operation_id={handle.operation_id}")
    return handle
