"""FastAPI dependency injection."""

from fairprice.data.neighborhoods import NeighborhoodRepository, get_repository


def get_neighborhoods() -> NeighborhoodRepository:
    return get_repository()
