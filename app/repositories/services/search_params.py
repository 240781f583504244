"""
Translation of listing-page query parameters into a GitHub search request.

Inbound keys: ``p`` (page), ``s`` (sort), ``o`` (order), ``q`` (free text),
``startStars`` and ``endStars`` (star-count bounds).
"""
from dataclasses import dataclass
from typing import Dict

PER_PAGE = 21


def stars_expression(start_stars: str, end_stars: str) -> str:
    """Star-count qualifier for a pair of optional bounds."""
    if start_stars and end_stars:
        return f"stars:{start_stars}..{end_stars}"
    if start_stars:
        return f"stars:>{start_stars}"
    if end_stars:
        return f"stars:<{end_stars}"
    return ""


def build_search_term(topic: str, language: str, query: str, stars: str) -> str:
    # Empty terms leave extra spaces behind; GitHub ignores them
    return f"topic:{topic} language:{language} {query} {stars}"


def parse_page(value) -> int:
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


@dataclass(frozen=True)
class SearchParams:
    page: int = 1
    sort: str = ""
    order: str = "desc"
    query: str = ""
    start_stars: str = "1"
    end_stars: str = ""
    per_page: int = PER_PAGE

    @classmethod
    def from_query(cls, query_dict) -> "SearchParams":
        """
        Build params from a request's GET mapping.

        Defaults only fill in absent keys, so ``startStars=`` explicitly
        removes the lower star bound.
        """
        return cls(
            page=parse_page(query_dict.get("p", "1")),
            sort=query_dict.get("s", ""),
            order=query_dict.get("o", "desc"),
            query=query_dict.get("q", ""),
            start_stars=query_dict.get("startStars", "1"),
            end_stars=query_dict.get("endStars", ""),
        )

    @property
    def stars(self) -> str:
        return stars_expression(self.start_stars, self.end_stars)

    def search_term(self, topic: str, language: str) -> str:
        return build_search_term(topic, language, self.query, self.stars)

    def to_api_params(self, topic: str, language: str) -> Dict[str, str]:
        # sort and order go through verbatim; GitHub rejects bad values itself
        return {
            "page": str(self.page),
            "per_page": str(self.per_page),
            "sort": self.sort,
            "order": self.order,
            "q": self.search_term(topic, language),
        }
