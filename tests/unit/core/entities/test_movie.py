"""
Tests pour les entites film (MovieSummary, MovieDetail, Credits).

Verifie l'immutabilite et les valeurs par defaut.
"""

import dataclasses

import pytest

from cinesearch.core.entities.movie import (
    CastMember,
    Credits,
    Genre,
    MovieDetail,
    MovieSummary,
)


class TestMovieSummary:
    """Tests pour l'entite MovieSummary."""

    def test_annee_depuis_la_date(self):
        movie = MovieSummary(id=1, title="The Matrix", release_date="1999-03-31")
        assert movie.year == "1999"

    def test_annee_absente(self):
        assert MovieSummary(id=2, title="Matrix Reloaded").year is None

    def test_immutable(self):
        """Une entite recue ne peut pas etre modifiee."""
        movie = MovieSummary(id=1, title="The Matrix")
        with pytest.raises(dataclasses.FrozenInstanceError):
            movie.title = "Other"


class TestMovieDetail:
    """Tests pour l'entite MovieDetail."""

    def test_valeurs_par_defaut(self):
        movie = MovieDetail(id=603, title="The Matrix")
        assert movie.overview == ""
        assert movie.genres == ()
        assert movie.runtime is None
        assert movie.vote_average is None
        assert movie.backdrop_path is None

    def test_genres_ordonnes(self):
        movie = MovieDetail(
            id=603,
            title="The Matrix",
            genres=(Genre(28, "Action"), Genre(878, "Science Fiction")),
        )
        assert [g.name for g in movie.genres] == ["Action", "Science Fiction"]


class TestCredits:
    """Tests pour l'entite Credits."""

    def test_distribution_vide_par_defaut(self):
        assert Credits().cast == ()

    def test_interprete(self):
        member = CastMember(name="Keanu Reeves", character="Neo", cast_id=34)
        assert member.profile_path is None
        credits = Credits(movie_id=603, cast=(member,))
        assert credits.cast[0].character == "Neo"
