import grpc

from ..errors import (
    AuthorizationError,
    ImageNotFoundError,
    ProvisioningError,
    RequestRejectedError,
    TransportError,
)

_AUTH_CODES = {grpc.StatusCode.UNAUTHENTICATED, grpc.StatusCode.PERMISSION_DENIED}
_TRANSPORT_CODES = {grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED, grpc.StatusCode.CANCELLED}
_REJECTED_CODES = {
    grpc.StatusCode.INVALID_ARGUMENT,
    grpc.StatusCode.FAILED_PRECONDITION,
    grpc.StatusCode.ALREADY_EXISTS,
    grpc.StatusCode.OUT_OF_RANGE,
    grpc.StatusCode.RESOURCE_EXHAUSTED,
}


def translate_rpc_error(exc: grpc.RpcError, step: str) -> ProvisioningError:
    code = exc.code() if hasattr(exc, "code") else None
    details = exc.details() if hasattr(exc, "details") else str(exc)
    code_name = code.name if code is not None else "UNKNOWN"
    message = f"{code_name}: {details}"

    if code in _AUTH_CODES:
        return AuthorizationError(message, step=step)
    if code in _TRANSPORT_CODES:
        return TransportError(message, step=step)
    if code == grpc.StatusCode.NOT_FOUND:
        # 创建阶段的 NOT_FOUND 通常是 subnet / disk type 写错
        if step == "resolve_image":
            return ImageNotFoundError(message, step=step)
        return RequestRejectedError(message, step=step)
    if code in _REJECTED_CODES:
        return RequestRejectedError(message, step=step)
    return ProvisioningError(message, step=step)
