from abc import ABC, abstractmethod

from .create_instances.types import CreationRequest, ImageInfo, OperationHandle


class IComputeClient(ABC):
    @abstractmethod
    def get_latest_image_by_family(self, family: str, folder_id: str) -> ImageInfo:
        ...

    @abstractmethod
    def create_instance(self, request: CreationRequest) -> OperationHandle:
        ...
