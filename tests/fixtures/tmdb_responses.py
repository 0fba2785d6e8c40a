"""
Reponses simulees de l'API TMDB pour les tests.

Contient des reponses realistes pour les endpoints exerces par les tests du
SDK. Ces fixtures servent avec respx pour simuler httpx, et comme valeurs de
retour du transport mocke.
"""

# GET /movie/550?language=en-US
TMDB_MOVIE_550_RESPONSE = {
    "adult": False,
    "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
    "budget": 63000000,
    "genres": [{"id": 18, "name": "Drama"}],
    "id": 550,
    "imdb_id": "tt0137523",
    "original_language": "en",
    "original_title": "Fight Club",
    "overview": "A ticking-time-bomb insomniac and a slippery soap salesman...",
    "popularity": 61.416,
    "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
    "release_date": "1999-10-15",
    "runtime": 139,
    "title": "Fight Club",
    "vote_average": 8.433,
    "vote_count": 26280,
}

# GET /search/movie?query=Fight+Club
TMDB_SEARCH_MOVIE_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "genre_ids": [18],
            "id": 550,
            "original_title": "Fight Club",
            "release_date": "1999-10-15",
            "title": "Fight Club",
            "vote_average": 8.4,
            "vote_count": 26280,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

# GET /keyword/825
TMDB_KEYWORD_RESPONSE = {"id": 825, "name": "support group"}

# POST /movie/550/rating
TMDB_RATING_RESPONSE = {
    "success": True,
    "status_code": 1,
    "status_message": "Success.",
}

# Corps 404
TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}

# Corps 401
TMDB_UNAUTHORIZED_RESPONSE = {
    "success": False,
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
}
