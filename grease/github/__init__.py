"""GitHub API access: HTTP transport, value types and release operations."""

from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .model import AssetFile, ReleaseDescriptor, RepositoryIdentifier, parse_repository
from .releases import ReleaseClient

__all__ = [
    "AssetFile",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "ReleaseClient",
    "ReleaseDescriptor",
    "RepositoryIdentifier",
    "parse_repository",
]
