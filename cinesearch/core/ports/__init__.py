"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API : Contrats pour le fournisseur de metadonnees
- IMovieAPIClient : Recherche, fiche et distribution d'un film
- ProviderError et ses sous-classes : Echecs du fournisseur
"""

from cinesearch.core.ports.api_clients import (
    IMovieAPIClient,
    ProviderError,
    ProviderParseError,
    ProviderStatusError,
    ProviderTransportError,
)

__all__ = [
    "IMovieAPIClient",
    "ProviderError",
    "ProviderParseError",
    "ProviderStatusError",
    "ProviderTransportError",
]
