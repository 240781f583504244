from typing import Dict, Optional
import logging
import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Raised when the GitHub API cannot be reached at all."""


class GitHubClient:
    SEARCH_PATH = "/search/repositories"
    # Preview media type that includes repository topics in search results
    ACCEPT = "application/vnd.github.mercy-preview+json"

    def __init__(self, api_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.api_url = (api_url or settings.GITHUB_API_URL).rstrip("/")
        self.session = session or requests.Session()

    def build_headers(self, token: Optional[str] = None) -> Dict[str, str]:
        headers = {"Accept": self.ACCEPT}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def search_repositories(self, params: Dict, token: Optional[str] = None) -> Optional[Dict]:
        """
        Run one repository search.

        Returns the decoded JSON payload, or None when GitHub answers with a
        non-success status (rate limit, bad credentials, invalid query, outage).
        """
        url = f"{self.api_url}{self.SEARCH_PATH}"
        try:
            response = self.session.get(url, params=params, headers=self.build_headers(token))
        except requests.exceptions.RequestException as e:
            logger.error("Error searching GitHub repositories: %s", e)
            raise GitHubClientError(f"Failed to search repositories: {e}") from e

        if not response.ok:
            logger.warning(
                "GitHub search returned %s for q=%r (authenticated=%s)",
                response.status_code,
                params.get("q"),
                bool(token),
            )
            return None

        return response.json()
