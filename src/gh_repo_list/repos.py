"""Repository listing over the GitHub REST API."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote

import niquests

logger = logging.getLogger(__name__)

API = "https://api.github.com"
PER_PAGE = 100
API_VERSION = "2022-11-28"

# missing timestamps sort last
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class ApiError(Exception):
    """Raised when the listing endpoint answers with a non-success status."""

    def __init__(self, status, reason, body):
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"Failed to fetch repos: {status} {reason} - {body}")


@dataclass(frozen=True)
class Repository:
    name: str
    url: str
    description: Optional[str] = None
    stars: int = 0
    language: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data):
        return cls(
            name=data["name"],
            url=data["html_url"],
            description=data.get("description"),
            stars=data.get("stargazers_count") or 0,
            language=data.get("language"),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


def parse_timestamp(value):
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_headers(token=None):
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": API_VERSION,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def fetch_repos(config):
    headers = build_headers(config.token)
    url = f"{API}/users/{quote(config.owner, safe='')}/repos"
    page = 1
    out = []
    while True:
        logger.debug("Fetching page %d for %s", page, config.owner)
        r = niquests.get(
            url,
            params={
                "type": "owner",
                "per_page": PER_PAGE,
                "page": page,
                "sort": "updated",
                "direction": "desc",
            },
            headers=headers,
            timeout=30,
        )
        if not r.ok:
            raise ApiError(r.status_code, r.reason, r.text or "")
        batch = r.json()
        if not isinstance(batch, list) or not batch:
            break
        out += [Repository.from_api(x) for x in batch]
        if len(batch) < PER_PAGE:
            break
        page += 1
    logger.debug("Fetched %d repositories in %d page(s)", len(out), page)
    return out


def select_repos(repos, featured=None, limit=None):
    """Deduplicate, order newest-updated first, then filter and truncate.

    ``featured`` matches a repository name exactly, ignoring case.
    """
    seen = set()
    unique = []
    for repo in repos:
        if repo.name in seen:
            continue
        seen.add(repo.name)
        unique.append(repo)

    unique.sort(key=lambda r: r.updated_at or _OLDEST, reverse=True)

    if featured:
        wanted = featured.lower()
        unique = [r for r in unique if r.name.lower() == wanted]
    if limit:
        unique = unique[:limit]
    return unique


def list_repos(config):
    return select_repos(fetch_repos(config), featured=config.featured, limit=config.limit)
