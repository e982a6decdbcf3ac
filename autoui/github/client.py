"""
GitHub REST client for AutoUI.
Fetches the questionnaire issue and its comments and posts bot replies.
"""

import re
from typing import Any, Dict, List, Optional

import requests

from autoui.exceptions import ConfigurationError, NetworkError
from autoui.interfaces import IssueTrackerInterface
from autoui.models import IssueComment, IssueSnapshot
from autoui.utils.logging_utils import LoggerMixin

REPOSITORY_PATTERN = re.compile(r"^[\w.-]+/[\w.-]+$")


class GitHubClient(IssueTrackerInterface, LoggerMixin):
    """Thin wrapper over the GitHub issues API."""

    def __init__(
        self,
        repository: str,
        token: Optional[str] = None,
        api_url: str = "https://api.github.com",
        timeout: int = 30,
        per_page: int = 100,
        session: Optional[requests.Session] = None,
    ):
        if not repository or not REPOSITORY_PATTERN.match(repository):
            raise ConfigurationError(
                "Invalid repository", f"expected 'owner/name', got {repository!r}"
            )

        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.per_page = per_page
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "autoui",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.repository}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self._url(path)
        self.logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise NetworkError(f"GitHub API {method} {path} failed ({status})", str(e))
        except requests.RequestException as e:
            raise NetworkError(f"GitHub API {method} {path} failed", str(e))
        except ValueError as e:
            raise NetworkError(f"GitHub API {method} {path} returned invalid JSON", str(e))

    def get_issue(self, number: int) -> Dict[str, Any]:
        return self._request("GET", f"issues/{number}")

    def list_comments(self, number: int) -> List[Dict[str, Any]]:
        """All comments on the issue, following pagination."""
        comments: List[Dict[str, Any]] = []
        page = 1
        while True:
            batch = self._request(
                "GET",
                f"issues/{number}/comments",
                params={"per_page": self.per_page, "page": page},
            )
            comments.extend(batch or [])
            if not batch or len(batch) < self.per_page:
                break
            page += 1

        self.logger.info(f"Fetched {len(comments)} comments for issue #{number}")
        return comments

    def create_comment(self, number: int, body: str) -> Dict[str, Any]:
        self.logger.info(f"Posting comment on issue #{number}")
        return self._request("POST", f"issues/{number}/comments", json={"body": body})

    def fetch_snapshot(self, number: int) -> IssueSnapshot:
        issue = self.get_issue(number)
        comments = self.list_comments(number)

        labels = [
            label if isinstance(label, str) else (label or {}).get("name", "")
            for label in issue.get("labels") or []
        ]

        return IssueSnapshot(
            number=number,
            title=issue.get("title") or "",
            body=issue.get("body") or "",
            labels=labels,
            comments=[
                IssueComment(
                    body=comment.get("body") or "",
                    author=(comment.get("user") or {}).get("login", ""),
                    created_at=comment.get("created_at"),
                )
                for comment in comments
            ],
        )
