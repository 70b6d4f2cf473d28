"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the search, movie details
and credits endpoints. These fixtures are used with respx to mock httpx calls
and with fake clients in controller and route tests.
"""

# Search response for "Matrix" query
# GET /search/movie?query=Matrix
TMDB_SEARCH_MATRIX_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 1,
            "title": "The Matrix",
            "release_date": "1999-03-31",
            "poster_path": "/a.jpg",
        },
        {
            "id": 2,
            "title": "Matrix Reloaded",
            "release_date": "2003-05-07",
            "poster_path": None,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# Empty search response
TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Movie details for The Matrix (id=603)
# GET /movie/603?language=en-US
TMDB_MOVIE_603_RESPONSE = {
    "adult": False,
    "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
    "budget": 63000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
    ],
    "homepage": "http://www.warnerbros.com/matrix",
    "id": 603,
    "imdb_id": "tt0133093",
    "original_language": "en",
    "original_title": "The Matrix",
    "overview": "Set in the 22nd century, The Matrix tells the story of a computer hacker who joins a group of underground insurgents fighting the vast and powerful computers who now rule the earth.",
    "popularity": 83.2,
    "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
    "release_date": "1999-03-30",
    "revenue": 463517383,
    "runtime": 136,
    "status": "Released",
    "tagline": "Welcome to the Real World.",
    "title": "The Matrix",
    "video": False,
    "vote_average": 8.2,
    "vote_count": 26000,
}

# Credits for The Matrix (id=603)
# GET /movie/603/credits?language=en-US
TMDB_CREDITS_603_RESPONSE = {
    "id": 603,
    "cast": [
        {
            "adult": False,
            "cast_id": 34,
            "character": "Thomas A. Anderson / Neo",
            "credit_id": "52fe425bc3a36847f80181c1",
            "id": 6384,
            "name": "Keanu Reeves",
            "order": 0,
            "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
        },
        {
            "adult": False,
            "cast_id": 35,
            "character": "Morpheus",
            "credit_id": "52fe425bc3a36847f80181c5",
            "id": 2975,
            "name": "Laurence Fishburne",
            "order": 1,
            "profile_path": None,
        },
    ],
    "crew": [
        {"id": 9339, "name": "Lilly Wachowski", "job": "Director"},
    ],
}

# Movie details with unknown runtime and rating, empty overview, no images
# GET /movie/42?language=en-US
TMDB_MOVIE_SPARSE_RESPONSE = {
    "id": 42,
    "title": "Obscure Short",
    "overview": "",
    "release_date": "",
    "poster_path": None,
    "backdrop_path": None,
    "genres": [],
    "runtime": 0,
    "vote_average": 0,
}

# Credits with more than ten cast members (only ten are displayed)
TMDB_CREDITS_LARGE_RESPONSE = {
    "id": 42,
    "cast": [
        {"cast_id": i, "character": f"Role {i}", "name": f"Actor {i}", "profile_path": None}
        for i in range(1, 13)
    ],
}

# Error body returned by TMDB for unknown ids
TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
