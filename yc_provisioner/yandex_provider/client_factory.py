from dataclasses import dataclass, field
from typing import Optional

import yandexcloud

from ..provider_interface import IComputeClient
from ..create_instances.types import CreationRequest, ImageInfo, OperationHandle
from .image import get_latest_image_by_family
from .instance import create_instance


@dataclass
class YandexClient(IComputeClient):
    iam_token: str = field(repr=False)
    _sdk: Optional[yandexcloud.SDK] = field(default=None, init=False, repr=False)

    def build(self) -> yandexcloud.SDK:
        # 不传 retry_policy，失败直接上抛
        if self._sdk is None:
            self._sdk = yandexcloud.SDK(iam_token=self.iam_token)
        return self._sdk

    def get_latest_image_by_family(self, family: str, folder_id: str) -> ImageInfo:
        return get_latest_image_by_family(self.build(), family, folder_id)

    def create_instance(self, request: CreationRequest) -> OperationHandle:
        return create_instance(self.build(), request)
