"""Routes web : recherche (/) et fiche film (/movie/{id})."""
