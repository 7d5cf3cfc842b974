"""Interface of the services that provide episode titles."""

from typing import Protocol

from tvrenamer.models.media import EpisodeMetadata, SeriesMetadata


class MetadataService(Protocol):
    """Protocol for series metadata lookups.

    Implementations raise an ``APIError`` subclass on any failure. The
    renaming core does not retry.
    """

    def search_series(self, name: str, language: str) -> SeriesMetadata:
        """Find a series by name.

        Args:
            name: Series name as typed by the user.
            language: Language code for the results.

        Returns:
            The best matching series.

        Raises:
            APIError: If the series cannot be found or fetched.
        """
        ...

    def get_episode(
        self, series: SeriesMetadata, season_number: int, episode_index: int
    ) -> EpisodeMetadata:
        """Fetch one episode of a series.

        Raises:
            APIError: If the episode cannot be found or fetched.
        """
        ...
