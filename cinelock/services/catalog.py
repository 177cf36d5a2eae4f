"""Movie and show catalog."""

from cinelock.exceptions import CatalogNotFoundError
from cinelock.models.catalog import Movie, Show

MOVIES: list[Movie] = [
    Movie(
        id="m1",
        title="Interstellar",
        genre="Sci-Fi / Drama",
        duration="2h 49m",
        image="https://picsum.photos/seed/interstellar/400/600",
        rating="8.7/10",
    ),
    Movie(
        id="m2",
        title="Inception",
        genre="Sci-Fi / Action",
        duration="2h 28m",
        image="https://picsum.photos/seed/inception/400/600",
        rating="8.8/10",
    ),
    Movie(
        id="m3",
        title="The Dark Knight",
        genre="Action / Crime",
        duration="2h 32m",
        image="https://picsum.photos/seed/batman/400/600",
        rating="9.0/10",
    ),
]

SHOWS: list[Show] = [
    Show(id="s1", movie_id="m1", time="14:30", theater="IMAX screen 1", price=15),
    Show(id="s2", movie_id="m1", time="18:00", theater="IMAX screen 1", price=18),
    Show(id="s3", movie_id="m2", time="15:00", theater="Screen 4", price=12),
    Show(id="s4", movie_id="m3", time="20:15", theater="Screen 2", price=14),
]


class CatalogService:
    """Read-only access to the fixed movie and show catalog."""

    def __init__(
        self,
        movies: list[Movie] | None = None,
        shows: list[Show] | None = None,
    ):
        self.movies = list(movies if movies is not None else MOVIES)
        self.shows = list(shows if shows is not None else SHOWS)

    def list_movies(self) -> list[Movie]:
        return list(self.movies)

    def get_movie(self, movie_id: str) -> Movie:
        for movie in self.movies:
            if movie.id == movie_id:
                return movie
        raise CatalogNotFoundError(f"Movie {movie_id} not found")

    def list_shows(self, movie_id: str | None = None) -> list[Show]:
        """Get shows, optionally only those of one movie."""
        if movie_id is None:
            return list(self.shows)
        self.get_movie(movie_id)
        return [show for show in self.shows if show.movie_id == movie_id]

    def get_show(self, show_id: str) -> Show:
        for show in self.shows:
            if show.id == show_id:
                return show
        raise CatalogNotFoundError(f"Show {show_id} not found")

    def default_show(self) -> Show:
        """Get the first show of the first movie."""
        shows = self.list_shows(self.movies[0].id)
        if not shows:
            raise CatalogNotFoundError("Catalog has no shows")
        return shows[0]
