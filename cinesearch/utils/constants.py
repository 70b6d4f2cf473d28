"""
Constantes globales pour CineSearch.

Ce module contient:
- L'hote des images TMDB et les tailles utilisees
- Les messages d'erreur de l'ecran de fiche
- Les textes de repli de la presentation
"""

# Images TMDB : {base}/{taille}{chemin}
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
POSTER_SIZE = "w500"
BACKDROP_SIZE = "original"
PROFILE_SIZE = "w200"

# Nombre d'interpretes affiches sur la fiche
CAST_DISPLAY_LIMIT = 10

# Messages de l'ecran de fiche
MOVIE_FETCH_ERROR = "Failed to fetch movie details."
CREDITS_FETCH_ERROR = "Failed to fetch credits."
UNEXPECTED_ERROR = "An unexpected error occurred."

# Textes de repli
NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description available."
