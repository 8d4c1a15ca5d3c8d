from typing import Optional

import grpc
import yandexcloud
from loguru import logger
logger = logger.patch(lambda record: record.update(message=f"[Yandex] {record['message']}"))
from yandex.cloud.compute.v1.instance_pb2 import IPV4
from yandex.cloud.compute.v1.instance_service_pb2 import (
    AttachedDiskSpec,
    CreateInstanceMetadata,
    CreateInstanceRequest,
    NetworkInterfaceSpec,
    OneToOneNatSpec,
    PrimaryAddressSpec,
    ResourcesSpec,
)
from yandex.cloud.compute.v1.instance_service_pb2_grpc import InstanceServiceStub

from ..create_instances.types import CreationRequest, OperationHandle
from .errors import translate_rpc_error


def as_create_instance_request(request: CreationRequest) -> CreateInstanceRequest:
    boot_disk = request.boot_disk
    network = request.network_interface

    if network.assign_public_ip:
        address_spec = PrimaryAddressSpec(one_to_one_nat_spec=OneToOneNatSpec(ip_version=IPV4))
    else:
        address_spec = PrimaryAddressSpec()

    return CreateInstanceRequest(
        folder_id=request.folder_id,
        name=request.name,
        zone_id=request.zone_id,
        platform_id=request.platform_id,
        labels=request.labels,
        metadata=request.metadata,
        resources_spec=ResourcesSpec(memory=request.memory, cores=request.cores),
        boot_disk_spec=AttachedDiskSpec(
            auto_delete=boot_disk.auto_delete,
            disk_spec=AttachedDiskSpec.DiskSpec(
                type_id=boot_disk.type_id,
                size=boot_disk.size,
                image_id=boot_disk.image_id,
            ),
        ),
        network_interface_specs=[
            NetworkInterfaceSpec(subnet_id=network.subnet_id, primary_v4_address_spec=address_spec),
        ],
    )


def _instance_id_from_operation(operation) -> Optional[str]:
    metadata = CreateInstanceMetadata()
    if operation.HasField("metadata") and operation.metadata.Unpack(metadata):
        return metadata.instance_id or None
    return None


def create_instance(sdk: yandexcloud.SDK, request: CreationRequest) -> OperationHandle:
    try:
        client = sdk.client(InstanceServiceStub)
        operation = client.Create(as_create_instance_request(request))
    except grpc.RpcError as exc:
        error = translate_rpc_error(exc, step="create_instance")
        logger.error(f"Create instance {request.name} failed: {error}")
        raise error from exc

    instance_id = _instance_id_from_operation(operation)
    logger.debug(f"Create operation {operation.id} started, instance_id={instance_id}")
    return OperationHandle(operation_id=operation.id, instance_id=instance_id, description=operation.description)
