from gateway.core.errors import ErrorKind, GatewayError
from gateway.core.results import OperationResult, UploadResult
from gateway.facade import BackendGateway

__all__ = [
    "BackendGateway",
    "ErrorKind",
    "GatewayError",
    "OperationResult",
    "UploadResult",
]
