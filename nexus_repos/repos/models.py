"""Repository configuration models.

Wire-level representation of a Nexus repository as returned by, and sent to,
the ``service/rest/beta/repositories`` endpoints. Attribute names are
snake_case; aliases carry the exact JSON keys.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RepositoryType(str, Enum):
    """Role of a repository."""

    HOSTED = "hosted"
    PROXY = "proxy"
    GROUP = "group"


class WritePolicy(str, Enum):
    """Controls deployments of and updates to assets in hosted repositories."""

    ALLOW = "allow"
    ALLOW_ONCE = "allow_once"
    DENY = "deny"


class WireModel(BaseModel):
    """Base for all repository models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RepositoryApt(WireModel):
    distribution: str = ""


class RepositoryAptSigning(WireModel):
    keypair: str = ""
    passphrase: str = ""


class RepositoryCleanup(WireModel):
    policy_names: List[str] = Field(default_factory=list, alias="policyNames")


class RepositoryBower(WireModel):
    rewrite_package_urls: bool = Field(False, alias="rewritePackageUrls")


class RepositoryDocker(WireModel):
    force_basic_auth: bool = Field(False, alias="forceBasicAuth")
    http_port: Optional[int] = Field(None, alias="httpPort")
    https_port: Optional[int] = Field(None, alias="httpsPort")
    v1_enabled: bool = Field(False, alias="v1Enabled")


class RepositoryDockerProxy(WireModel):
    index_type: str = Field("", alias="indexType")
    index_url: Optional[str] = Field(None, alias="indexUrl")


class RepositoryHTTPClientAuthentication(WireModel):
    ntlm_domain: str = Field("", alias="ntlmDomain")
    ntlm_host: str = Field("", alias="ntlmHost")
    type: str = ""
    username: str = ""


class RepositoryHTTPClientConnection(WireModel):
    enable_circular_redirects: bool = Field(False, alias="enableCircularRedirects")
    enable_cookies: bool = Field(False, alias="enableCookies")
    retries: int = 0
    timeout: int = 0
    user_agent_suffix: str = Field("", alias="userAgentSuffix")


class RepositoryHTTPClient(WireModel):
    """Outbound HTTP settings of a proxy repository."""

    authentication: RepositoryHTTPClientAuthentication = Field(
        default_factory=RepositoryHTTPClientAuthentication
    )
    auto_block: bool = Field(False, alias="autoBlock")
    blocked: bool = False
    connection: RepositoryHTTPClientConnection = Field(
        default_factory=RepositoryHTTPClientConnection
    )


class RepositoryNegativeCache(WireModel):
    enabled: bool = False
    ttl: int = Field(0, alias="timeToLive")


class RepositoryProxy(WireModel):
    """Upstream location and cache freshness windows (minutes)."""

    content_max_age: int = Field(0, alias="contentMaxAge")
    metadata_max_age: int = Field(0, alias="metadataMaxAge")
    remote_url: str = Field("", alias="remoteUrl")


class RepositoryStorage(WireModel):
    """Blob store binding.

    ``write_policy`` only applies to hosted repositories and is left out of
    the payload when unset.
    """

    blob_store_name: str = Field("", alias="blobStoreName")
    strict_content_type_validation: bool = Field(
        False, alias="strictContentTypeValidation"
    )
    write_policy: Optional[WritePolicy] = Field(None, alias="writePolicy")


# Sub-configurations dropped from the payload when absent. The remaining
# ones are sent as explicit nulls.
_OMIT_WHEN_ABSENT = ("apt", "apt_signing")
_OMIT_WHEN_EMPTY = ("format", "type")


class Repository(WireModel):
    """A named repository of a given format and type.

    Sub-configurations are optional and only populated for the formats and
    types that use them: ``proxy``, ``http_client`` and ``negative_cache``
    for proxies, ``storage.write_policy`` for hosted repositories, ``apt``
    for apt repositories and so on.
    """

    format: str = ""
    name: str
    online: bool = True
    type: str = ""

    apt: Optional[RepositoryApt] = None
    apt_signing: Optional[RepositoryAptSigning] = Field(None, alias="aptSigning")
    cleanup: Optional[RepositoryCleanup] = None
    bower: Optional[RepositoryBower] = None
    docker: Optional[RepositoryDocker] = None
    docker_proxy: Optional[RepositoryDockerProxy] = Field(None, alias="dockerProxy")
    http_client: Optional[RepositoryHTTPClient] = Field(None, alias="httpClient")
    negative_cache: Optional[RepositoryNegativeCache] = Field(
        None, alias="negativeCache"
    )
    proxy: Optional[RepositoryProxy] = None
    storage: Optional[RepositoryStorage] = None

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the JSON-ready dictionary sent to the REST API."""
        payload = self.model_dump(mode="json", by_alias=True)

        for attr in _OMIT_WHEN_EMPTY:
            if not getattr(self, attr):
                payload.pop(attr, None)
        for attr in _OMIT_WHEN_ABSENT:
            if getattr(self, attr) is None:
                payload.pop(self._alias(attr), None)

        storage = payload.get("storage")
        if storage is not None:
            if storage["writePolicy"] is None:
                del storage["writePolicy"]
            if not storage["blobStoreName"]:
                del storage["blobStoreName"]

        docker = payload.get("docker")
        if docker is not None:
            for key in ("httpPort", "httpsPort"):
                if docker[key] is None:
                    del docker[key]

        docker_proxy = payload.get("dockerProxy")
        if docker_proxy is not None and docker_proxy["indexUrl"] is None:
            del docker_proxy["indexUrl"]

        return payload

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Repository":
        """Build a repository from a decoded JSON object.

        Raises:
            pydantic.ValidationError: If the object does not describe a repository
        """
        return cls.model_validate(data)

    @classmethod
    def _alias(cls, attr: str) -> str:
        return cls.model_fields[attr].alias or attr
