"""Client for the Nexus repository management REST API.

Create, read, update and delete repositories through the
``service/rest/beta/repositories`` endpoints. Network I/O is delegated to
an injected :class:`~nexus_repos.repos.transport.Transport`.
"""

import json
from typing import List, Optional, Union

import httpx
from pydantic import ValidationError

from ..common.logger import get_logger
from .errors import DecodeError, RequestError
from .models import Repository, RepositoryType
from .transport import Transport, TransportResponse

logger = get_logger("repository_client")

REPOSITORY_API_ENDPOINT = "service/rest/beta/repositories"

CREATE_OK = (200, 201)
READ_OK = (200,)
UPDATE_OK = (200, 204)
DELETE_OK = (200, 204)


def _segment(value: Union[str, RepositoryType]) -> str:
    if isinstance(value, RepositoryType):
        return value.value
    return value


class RepositoryClient:
    """Manage repositories on a Nexus Repository Manager instance.

    The client holds no state besides its transport; every method is a
    single request/response exchange.
    """

    def __init__(self, transport: Transport):
        """Initialize client.

        Args:
            transport: Transport used to reach the Nexus server
        """
        self.transport = transport

    def create(
        self,
        repo: Repository,
        format: str,
        repo_type: Union[str, RepositoryType],
    ) -> None:
        """Create a repository.

        Args:
            repo: Repository definition
            format: Repository format (e.g., 'maven2', 'apt', 'docker')
            repo_type: Repository type ('hosted', 'proxy' or 'group')

        Raises:
            RequestError: If the request fails or status is not 200/201
        """
        path = f"{REPOSITORY_API_ENDPOINT}/{format}/{_segment(repo_type)}"
        response = self._send("create", repo.name, "post", path, self._encode(repo))
        self._check("create", repo.name, response, CREATE_OK)
        logger.info(f"Created repository {repo.name}")

    def list(self) -> List[Repository]:
        """List all repositories in server order.

        Raises:
            RequestError: If the request fails or status is not 200
            DecodeError: If the body is not a JSON list of repositories
        """
        return self._list("list", "")

    def read(self, name: str) -> Optional[Repository]:
        """Read a repository by name.

        The list endpoint has no server-side filter, so all repositories are
        fetched and scanned.

        Args:
            name: Repository name

        Returns:
            Matching repository, or None if no repository has that name

        Raises:
            RequestError: If the request fails or status is not 200
            DecodeError: If the body is not a JSON list of repositories
        """
        for repo in self._list("read", name):
            if repo.name == name:
                return repo

        logger.debug(f"Repository {name} not found")
        return None

    def update(
        self,
        name: str,
        repo: Repository,
        format: str,
        repo_type: Union[str, RepositoryType],
    ) -> None:
        """Update an existing repository.

        Args:
            name: Name of the repository to update
            repo: New repository definition
            format: Repository format
            repo_type: Repository type

        Raises:
            RequestError: If the request fails or status is not 200/204
        """
        path = f"{REPOSITORY_API_ENDPOINT}/{format}/{_segment(repo_type)}/{name}"
        response = self._send("update", name, "put", path, self._encode(repo))
        self._check("update", name, response, UPDATE_OK)
        logger.info(f"Updated repository {name}")

    def delete(self, name: str) -> None:
        """Delete a repository.

        Args:
            name: Repository name

        Raises:
            RequestError: If the request fails or status is not 200/204
        """
        path = f"{REPOSITORY_API_ENDPOINT}/{name}"
        response = self._send("delete", name, "delete", path)
        self._check("delete", name, response, DELETE_OK)
        logger.info(f"Deleted repository {name}")

    def _list(self, action: str, name: str) -> List[Repository]:
        response = self._send(action, name, "get", REPOSITORY_API_ENDPOINT)
        self._check(action, name, response, READ_OK)

        try:
            data = json.loads(response.content)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [Repository.from_payload(item) for item in data]
        except (ValueError, TypeError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            raise DecodeError(f"could not unmarshal repositories: {e}") from e

    def _send(
        self,
        action: str,
        name: str,
        method: str,
        path: str,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        logger.debug(f"{method.upper()} {path}")
        try:
            if method == "get":
                return self.transport.get(path, None)
            if method == "post":
                return self.transport.post(path, body)
            if method == "put":
                return self.transport.put(path, body)
            return self.transport.delete(path)
        except (httpx.HTTPError, OSError) as e:
            logger.warning(f"Could not {action} repository {name}: {e}")
            raise RequestError(action, name, body=str(e)) from e

    @staticmethod
    def _check(
        action: str,
        name: str,
        response: TransportResponse,
        expected: tuple,
    ) -> None:
        if response.status_code in expected:
            return

        body = response.content.decode("utf-8", errors="replace")
        logger.warning(
            f"Could not {action} repository {name}: HTTP {response.status_code}"
        )
        raise RequestError(action, name, response.status_code, body)

    @staticmethod
    def _encode(repo: Repository) -> bytes:
        return json.dumps(repo.to_payload()).encode("utf-8")
