"""Interface web FastAPI : pages de recherche et de fiche film."""
