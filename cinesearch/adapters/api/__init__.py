"""
Client API externe pour les metadonnees films.

Ce module fournit l'adaptateur pour communiquer avec TMDB (The Movie Database):
- TMDBClient : implementation de IMovieAPIClient
- tmdb_schemas : schemas pydantic des trois formes de reponse consommees

Le client implemente IMovieAPIClient defini dans core/ports/api_clients.py.
"""

from cinesearch.adapters.api.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
