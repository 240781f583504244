from .repositories_service import ListingPage, RepositorySearchResult, RepositoryService
from .search_params import SearchParams

__all__ = ["ListingPage", "RepositorySearchResult", "RepositoryService", "SearchParams"]
