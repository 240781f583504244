import logging
import math
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional

from accounts.models import Account
from django.conf import settings
from ..clients.github_client import GitHubClient
from ..models import Report
from .search_params import PER_PAGE, SearchParams

logger = logging.getLogger(__name__)

# GitHub search never returns more than this many results for one query
SEARCH_RESULT_LIMIT = 1000
REPORT_LOOKUP_LIMIT = 100


@dataclass(frozen=True)
class RepositorySearchResult:
    """One page of GitHub search results."""
    total_count: int
    items: List[Dict] = field(default_factory=list)
    incomplete_results: bool = False

    @classmethod
    def from_payload(cls, payload: Dict) -> "RepositorySearchResult":
        return cls(
            total_count=payload["total_count"],
            items=payload["items"],
            incomplete_results=payload.get("incomplete_results", False),
        )

    def with_items(self, items: List[Dict]) -> "RepositorySearchResult":
        # total_count keeps GitHub's unfiltered figure
        return replace(self, items=items)


@dataclass(frozen=True)
class ListingPage:
    page: int
    language: str
    repositories: RepositorySearchResult
    per_page: int = PER_PAGE

    @property
    def total_pages(self) -> int:
        reachable = min(self.repositories.total_count, SEARCH_RESULT_LIMIT)
        return math.ceil(reachable / self.per_page)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def previous_page(self) -> Optional[int]:
        return self.page - 1 if self.has_previous else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next else None


class RepositoryService():
    def __init__(self, github_client=None, default_token: Optional[str] = None, topic: Optional[str] = None):
        self.github_client = github_client or GitHubClient()
        self.default_token = default_token
        self.topic = topic or settings.GITHUB_TOPIC

    def resolve_token(self, user_id=None) -> Optional[str]:
        """
        Pick the credential for the search call.

        A signed-in user's linked account token wins over the site-wide
        default token. No token at all is allowed: GitHub then serves the
        request anonymously with a lower rate limit.
        """
        if user_id is not None:
            account = Account.objects.filter(user_id=user_id).first()
            if account and account.access_token:
                return account.access_token
        return self.default_token

    def active_reports(self) -> List[Report]:
        return list(Report.objects.filter(valid=False)[:REPORT_LOOKUP_LIMIT])

    @staticmethod
    def filter_repositories(result: RepositorySearchResult, reports: Iterable[Report]) -> RepositorySearchResult:
        reported_ids = {report.repo_id for report in reports}
        visible = [
            repo for repo in result.items
            if not repo.get("archived") and repo.get("id") not in reported_ids
        ]
        return result.with_items(visible)

    def get_repositories(self, language: str, params: SearchParams, user_id=None) -> Optional[ListingPage]:
        """
        Fetch one listing page for ``language``.

        Returns None when GitHub answers with an error status or when nothing
        is left to show after moderation; callers render that as not found.
        """
        token = self.resolve_token(user_id)
        logger.info(
            "Searching %s repositories for language=%s page=%s",
            self.topic, language, params.page,
        )

        payload = self.github_client.search_repositories(
            params.to_api_params(self.topic, language),
            token=token,
        )
        if payload is None:
            return None

        result = RepositorySearchResult.from_payload(payload)
        if not isinstance(result.items, list):
            return None

        filtered = self.filter_repositories(result, self.active_reports())
        dropped = len(result.items) - len(filtered.items)
        if dropped:
            logger.info("Hid %s archived or reported repositories for %s", dropped, language)

        if not filtered.items:
            return None

        return ListingPage(page=params.page, language=language, repositories=filtered)
