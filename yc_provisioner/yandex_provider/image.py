import grpc
import yandexcloud
from yandex.cloud.compute.v1.image_service_pb2 import GetImageLatestByFamilyRequest
from yandex.cloud.compute.v1.image_service_pb2_grpc import ImageServiceStub

from ..create_instances.types import ImageInfo
from .errors import translate_rpc_error


def get_latest_image_by_family(sdk: yandexcloud.SDK, family: str, folder_id: str) -> ImageInfo:
    # sdk.client() 会先做 endpoint 发现，同样可能失败
    try:
        client = sdk.client(ImageServiceStub)
        image = client.GetLatestByFamily(GetImageLatestByFamilyRequest(family=family, folder_id=folder_id))
    except grpc.RpcError as exc:
        raise translate_rpc_error(exc, step="resolve_image") from exc

    return ImageInfo(image_id=image.id, image_name=image.name, family=image.family)
