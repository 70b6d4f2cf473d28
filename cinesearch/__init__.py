"""CineSearch - recherche de films et fiches detaillees via l'API TMDB."""
