"""Metadata service clients."""

from tvrenamer.api.metadata import MetadataService
from tvrenamer.api.tvdb_client import TvdbClient
from tvrenamer.api.validation import get_api_key, require_tvdb_api_key

__all__ = ["MetadataService", "TvdbClient", "get_api_key", "require_tvdb_api_key"]
