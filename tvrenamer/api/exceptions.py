"""Erreurs du service de métadonnées (TVDB)."""


def episode_code(season: int, episode: int) -> str:
    """Code court d'un épisode, par exemple S01E02."""
    return f"S{season:02d}E{episode:02d}"


class APIError(Exception):
    """Classe de base pour toutes les erreurs du service de métadonnées."""


class APIConfigurationError(APIError):
    """
    Le client ne peut pas être utilisé tel quel (clé API absente).

    Attributes:
        variable: Variable d'environnement attendue.
    """

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} is not set")


class APIConnectionError(APIError):
    """
    Le service n'a pas répondu (réseau, erreur TVDB).

    Attributes:
        operation: Opération interrompue, par exemple "search 'Lost'".
    """

    def __init__(self, operation: str, detail: object) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {detail}")


class APIResponseError(APIError):
    """Réponse reçue mais inexploitable."""


class SeriesNotFoundError(APIResponseError):
    """Aucune série de ce nom sur le service."""

    def __init__(self, series_name: str) -> None:
        self.series_name = series_name
        super().__init__(f"Series '{series_name}' not found")


class EpisodeNotFoundError(APIResponseError):
    """
    Épisode absent, ou présent sans titre.

    Attributes:
        series_name: Série interrogée.
        season: Numéro de saison.
        episode: Numéro d'épisode.
    """

    def __init__(self, series_name: str, season: int, episode: int, reason: str = "not found") -> None:
        self.series_name = series_name
        self.season = season
        self.episode = episode
        super().__init__(
            f"Episode {episode_code(season, episode)} of '{series_name}' {reason}"
        )
