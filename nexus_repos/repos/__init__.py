"""Repository management for Nexus Repository Manager.

Typed repository definitions and a client that creates, reads, updates
and deletes them through the Nexus REST API.
"""

from .client import RepositoryClient
from .errors import NexusError, RequestError, DecodeError
from .models import (
    Repository,
    RepositoryType,
    WritePolicy,
    RepositoryApt,
    RepositoryAptSigning,
    RepositoryCleanup,
    RepositoryBower,
    RepositoryDocker,
    RepositoryDockerProxy,
    RepositoryHTTPClient,
    RepositoryHTTPClientAuthentication,
    RepositoryHTTPClientConnection,
    RepositoryNegativeCache,
    RepositoryProxy,
    RepositoryStorage,
)
from .transport import Transport, HttpxTransport

__all__ = [
    "RepositoryClient",
    "NexusError",
    "RequestError",
    "DecodeError",
    "Repository",
    "RepositoryType",
    "WritePolicy",
    "RepositoryApt",
    "RepositoryAptSigning",
    "RepositoryCleanup",
    "RepositoryBower",
    "RepositoryDocker",
    "RepositoryDockerProxy",
    "RepositoryHTTPClient",
    "RepositoryHTTPClientAuthentication",
    "RepositoryHTTPClientConnection",
    "RepositoryNegativeCache",
    "RepositoryProxy",
    "RepositoryStorage",
    "Transport",
    "HttpxTransport",
]
