"""Catalog models."""

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    """A movie offered by the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    genre: str
    duration: str
    image: str
    rating: str


class Show(BaseModel):
    """A scheduled screening of a movie."""

    model_config = ConfigDict(frozen=True)

    id: str
    movie_id: str
    time: str
    theater: str
    price: int
