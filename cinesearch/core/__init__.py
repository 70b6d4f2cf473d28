"""Domaine : entites film et ports vers le fournisseur de metadonnees."""
