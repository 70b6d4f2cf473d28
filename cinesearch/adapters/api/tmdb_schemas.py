"""
Schemas pydantic des reponses TMDB.

Les reponses du fournisseur sont validees a la reception : un champ
obligatoire manquant ou mal type devient une ProviderParseError au lieu
de se degrader silencieusement dans les templates. Les champs d'affichage
optionnels restent optionnels (la presentation affiche alors "N/A").

Les chaines vides que TMDB renvoie pour les dates et les images sont
normalisees en None.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinesearch.core.entities.movie import (
    CastMember,
    Credits,
    Genre,
    MovieDetail,
    MovieSummary,
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class _TMDBPayload(BaseModel):
    """Base commune : les champs non consommes sont ignores."""

    model_config = ConfigDict(extra="ignore")


class MovieSummaryPayload(_TMDBPayload):
    id: int
    title: str = ""
    release_date: Optional[str] = None
    poster_path: Optional[str] = None

    normalize_blanks = field_validator("release_date", "poster_path", mode="before")(
        _blank_to_none
    )

    def to_entity(self) -> MovieSummary:
        return MovieSummary(
            id=self.id,
            title=self.title,
            release_date=self.release_date,
            poster_path=self.poster_path,
        )


class SearchPayload(_TMDBPayload):
    """GET /search/movie -> { results: [...] }"""

    results: list[MovieSummaryPayload] = Field(default_factory=list)

    results_or_empty = field_validator("results", mode="before")(_none_to_empty_list)

    def to_entities(self) -> list[MovieSummary]:
        return [item.to_entity() for item in self.results]


class GenrePayload(_TMDBPayload):
    id: int
    name: str


class MovieDetailPayload(_TMDBPayload):
    """GET /movie/{id} -> objet plat."""

    id: int
    title: str = ""
    overview: Optional[str] = ""
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genres: list[GenrePayload] = Field(default_factory=list)
    runtime: Optional[int] = None
    vote_average: Optional[float] = Field(default=None, ge=0, le=10)

    normalize_blanks = field_validator(
        "release_date", "poster_path", "backdrop_path", mode="before"
    )(_blank_to_none)
    genres_or_empty = field_validator("genres", mode="before")(_none_to_empty_list)

    def to_entity(self) -> MovieDetail:
        return MovieDetail(
            id=self.id,
            title=self.title,
            overview=self.overview or "",
            release_date=self.release_date,
            poster_path=self.poster_path,
            backdrop_path=self.backdrop_path,
            genres=tuple(Genre(id=g.id, name=g.name) for g in self.genres),
            runtime=self.runtime,
            vote_average=self.vote_average,
        )


class CastMemberPayload(_TMDBPayload):
    name: str
    character: Optional[str] = ""
    cast_id: Optional[int] = None
    profile_path: Optional[str] = None

    normalize_blanks = field_validator("profile_path", mode="before")(_blank_to_none)

    def to_entity(self) -> CastMember:
        return CastMember(
            name=self.name,
            character=self.character or "",
            cast_id=self.cast_id,
            profile_path=self.profile_path,
        )


class CreditsPayload(_TMDBPayload):
    """GET /movie/{id}/credits -> { id, cast: [...] }"""

    id: Optional[int] = None
    cast: list[CastMemberPayload] = Field(default_factory=list)

    cast_or_empty = field_validator("cast", mode="before")(_none_to_empty_list)

    def to_entity(self) -> Credits:
        return Credits(
            movie_id=self.id,
            cast=tuple(member.to_entity() for member in self.cast),
        )
