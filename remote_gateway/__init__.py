from __future__ import annotations  # Re-export remote_gateway public API

from .remote_gateway import (
    HttpClient,
    HttpResponse,
    RemoteGatewayError,
    RemoteMalformed,
    RemoteRejected,
    RemoteUnavailable,
    post_json,
    probe,
)

__all__ = [
    "HttpClient",
    "HttpResponse",
    "RemoteGatewayError",
    "RemoteMalformed",
    "RemoteRejected",
    "RemoteUnavailable",
    "post_json",
    "probe",
]
