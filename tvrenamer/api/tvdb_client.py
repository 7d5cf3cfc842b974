"""TVDB (The TV Database) API client wrapper."""

from typing import Any, Dict, Optional

import requests
import tvdb_api
from loguru import logger

from tvrenamer.api.exceptions import (
    APIConfigurationError,
    APIConnectionError,
    APIResponseError,
    EpisodeNotFoundError,
    SeriesNotFoundError,
    episode_code,
)
from tvrenamer.config.settings import DEFAULT_LANGUAGE, TVDB_API_KEY_ENV
from tvrenamer.models.media import EpisodeMetadata, SeriesMetadata


class TvdbClient:
    """
    Wrapper for TVDB API using tvdb_api library.

    Implements the MetadataService protocol: a series search and an
    episode lookup, both raising APIError subclasses on failure.

    Attributes:
        api_key: TVDB API key for authentication.
        language: Default language code for results.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE
    ) -> None:
        """
        Initialize TVDB client.

        Args:
            api_key: TVDB API key. Required for API access.
            language: Language code for results (default: 'en').
        """
        self.api_key = api_key
        self.language = language
        self._clients: Dict[str, Any] = {}

    def _get_client(self, language: Optional[str] = None) -> Any:
        """
        Get or create the tvdb_api.Tvdb instance for a language.

        Args:
            language: Override language for this client instance.

        Returns:
            tvdb_api.Tvdb instance.

        Raises:
            APIConfigurationError: If the API key is missing.
            APIConnectionError: If the client cannot be created.
        """
        if not self.api_key:
            raise APIConfigurationError(TVDB_API_KEY_ENV)

        lang = language or self.language
        if lang not in self._clients:
            try:
                self._clients[lang] = tvdb_api.Tvdb(
                    apikey=self.api_key,
                    language=lang,
                    interactive=False
                )
            except (tvdb_api.tvdb_error, requests.RequestException) as e:
                raise APIConnectionError("TVDB client creation", e) from e
        return self._clients[lang]

    def search_series(self, name: str, language: Optional[str] = None) -> SeriesMetadata:
        """
        Search a series by name.

        Args:
            name: Name of the TV series to search for.
            language: Override language for this search.

        Returns:
            SeriesMetadata of the first match.

        Raises:
            SeriesNotFoundError: If TVDB has no such series.
            APIConnectionError: On network or API failure.
        """
        client = self._get_client(language)

        try:
            series = client[name]
        except (tvdb_api.tvdb_shownotfound, KeyError) as e:
            logger.debug(f"Series '{name}' not found: {e}")
            raise SeriesNotFoundError(name) from e
        except (tvdb_api.tvdb_error, requests.RequestException) as e:
            logger.warning(f"Error searching for series '{name}': {e}")
            raise APIConnectionError(f"search for '{name}'", e) from e

        try:
            series_id = int(series['id'])
        except (KeyError, TypeError, ValueError) as e:
            raise APIResponseError(f"Series '{name}' has no usable id") from e

        logger.debug(f"Series '{name}' found: {series_id}")
        return SeriesMetadata(series_id=series_id, name=name)

    def get_episode(
        self,
        series: SeriesMetadata,
        season_number: int,
        episode_index: int,
        language: Optional[str] = None
    ) -> EpisodeMetadata:
        """
        Get an episode by season and episode number.

        Args:
            series: Series returned by search_series.
            season_number: Season number.
            episode_index: Episode number within the season.
            language: Override language for this search.

        Returns:
            EpisodeMetadata with the episode title.

        Raises:
            EpisodeNotFoundError: If the episode does not exist or has no title.
            APIConnectionError: On network or API failure.
        """
        client = self._get_client(language)
        code = episode_code(season_number, episode_index)

        try:
            episode_data = client[series.series_id][season_number][episode_index]
        except (tvdb_api.tvdb_shownotfound,
                tvdb_api.tvdb_seasonnotfound,
                tvdb_api.tvdb_episodenotfound) as e:
            logger.debug(f"Episode {code} not found: {e}")
            raise EpisodeNotFoundError(series.name, season_number, episode_index) from e
        except (tvdb_api.tvdb_error, requests.RequestException) as e:
            logger.warning(f"Error fetching episode info: {e}")
            raise APIConnectionError(f"episode {code} lookup", e) from e

        title = episode_data.get('episodeName') if episode_data else None
        if not title:
            raise EpisodeNotFoundError(
                series.name, season_number, episode_index, reason="has no title"
            )

        return EpisodeMetadata(title=title, season=season_number, episode=episode_index)
