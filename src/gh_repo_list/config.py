import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_OWNER = "Kwts30"
DEFAULT_README = "README.md"


@dataclass(frozen=True)
class Config:
    owner: str
    token: Optional[str] = None
    featured: Optional[str] = None
    limit: Optional[int] = None
    readme_path: str = DEFAULT_README

    @classmethod
    def from_env(cls, environ=None):
        """Build the run configuration from environment variables.

        Nothing here raises: unusable values fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        token = env.get("GITHUB_TOKEN") or env.get("GH_TOKEN") or None

        repo = env.get("GITHUB_REPOSITORY") or ""
        default_owner = repo.split("/")[0].strip() or DEFAULT_OWNER
        owner = (env.get("TARGET_USERNAME") or "").strip() or default_owner

        featured = (env.get("FEATURED_REPO") or "").strip().lower() or None

        return cls(
            owner=owner,
            token=token,
            featured=featured,
            limit=parse_limit(env.get("REPO_LIST_LIMIT")),
            readme_path=(env.get("README_PATH") or "").strip() or DEFAULT_README,
        )


def parse_limit(raw):
    try:
        limit = int((raw or "").strip())
    except ValueError:
        return None
    return limit if limit > 0 else None
