"""Catalog schemas."""

from cinelock.schemas.common import BaseSchema


class MovieResponse(BaseSchema):
    """Schema for movie response."""

    id: str
    title: str
    genre: str
    duration: str
    image: str
    rating: str


class ShowResponse(BaseSchema):
    """Schema for show response."""

    id: str
    movie_id: str
    time: str
    theater: str
    price: int
