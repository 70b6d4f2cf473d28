"""Constantes et fonctions utilitaires de presentation."""
