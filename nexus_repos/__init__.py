"""nexus-repos - manage Nexus Repository Manager repositories over REST."""

from .repos import RepositoryClient, Repository, HttpxTransport

__version__ = "0.1.0"

__all__ = ["RepositoryClient", "Repository", "HttpxTransport", "__version__"]
