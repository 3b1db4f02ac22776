"""
GitHub REST API follower provider implementation.

Implements the FollowerProvider interface for GET /users/{username}/followers.
"""
import requests
from urllib.parse import quote
from typing import Any, Dict, List, Optional
import bittensor as bt

from connecticut.utils.config import GITHUB_API_URL
from connecticut.utils.error_handling import (
    AuthorizationFailure,
    ErrorMessages,
    IdentifierNotFound,
    ResolutionError,
    TransientServiceFailure,
    log_and_raise_api_error,
)
from .follower_provider import FollowerProvider


class GitHubProvider(FollowerProvider):
    """
    GitHub REST API implementation of follower lookups.

    Reads a single page of followers per user. Failures are classified into
    the run error taxonomy and raised; nothing is retried.
    """

    def __init__(self, api_key: str, timeout: float = 30.0, per_page: int = 30,
                 base_url: Optional[str] = None):
        """
        Initialize GitHub provider.

        Args:
            api_key: GitHub personal access token
            timeout: Request timeout in seconds
            per_page: Followers requested for the single page that is read
            base_url: Override for the API root (default: GITHUB_API_URL)
        """
        self.api_key = (api_key or "").strip()
        self.base_url = (base_url or GITHUB_API_URL).rstrip('/')
        self.timeout = timeout
        self.per_page = per_page

        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"token {self.api_key}"
        }

    def validate_api_key(self) -> bool:
        """
        Validate GitHub token (any non-empty string without whitespace).

        Returns:
            True if token is usable, False otherwise
        """
        return bool(self.api_key) and not any(c.isspace() for c in self.api_key)

    def fetch_followers(self, username: str) -> List[str]:
        """
        Fetch the first page of followers for a GitHub user.

        Args:
            username: GitHub login

        Returns:
            List of follower logins
        """
        url = f"{self.base_url}/users/{quote(username, safe='')}/followers"
        params = {"per_page": self.per_page}
        context = f"Follower lookup for @{username}"

        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log_and_raise_api_error(
                e, url, identifier=username, params=params,
                context=f"{context} ({ErrorMessages.API_TIMEOUT})",
                error_class=TransientServiceFailure
            )
        except requests.exceptions.RequestException as e:
            log_and_raise_api_error(
                e, url, identifier=username, params=params,
                context=f"{context} ({ErrorMessages.API_CONNECTION_FAILED})",
                error_class=TransientServiceFailure
            )

        self._raise_for_status(response, url, username, params, context)

        try:
            data = response.json()
        except ValueError as e:
            log_and_raise_api_error(
                e, url, identifier=username, params=params,
                context=f"{context} ({ErrorMessages.API_INVALID_RESPONSE})",
                error_class=TransientServiceFailure
            )

        followers = self._parse_followers(data, url, username)
        bt.logging.debug(f"Fetched {len(followers)} followers from GitHub for @{username}")
        return followers

    def _raise_for_status(self, response, url: str, username: str,
                          params: Dict[str, Any], context: str) -> None:
        """Map a non-2xx response onto the run error taxonomy."""
        status = response.status_code
        if 200 <= status < 300:
            return

        error = RuntimeError(f"HTTP {status}")

        if status == 401:
            error_class, reason = AuthorizationFailure, ErrorMessages.CREDENTIALS_REJECTED
        elif status == 403:
            # GitHub signals an exhausted quota with 403 and a zero remaining header
            if response.headers.get("X-RateLimit-Remaining") == "0":
                error_class, reason = TransientServiceFailure, ErrorMessages.API_RATE_LIMITED
            else:
                error_class, reason = AuthorizationFailure, ErrorMessages.CREDENTIALS_REJECTED
        elif status == 404:
            error_class, reason = IdentifierNotFound, ErrorMessages.IDENTIFIER_NOT_FOUND
        elif status == 429:
            error_class, reason = TransientServiceFailure, ErrorMessages.API_RATE_LIMITED
        elif status >= 500:
            error_class, reason = TransientServiceFailure, ErrorMessages.API_CONNECTION_FAILED
        else:
            error_class, reason = ResolutionError, ErrorMessages.API_INVALID_RESPONSE

        log_and_raise_api_error(
            error, url, identifier=username, params=params,
            context=f"{context} ({reason})",
            error_class=error_class
        )

    def _parse_followers(self, data: Any, url: str, username: str) -> List[str]:
        """
        Extract follower logins from the response body.

        Args:
            data: Decoded JSON body, expected to be a list of user objects
            url: Endpoint used, for error context
            username: User whose followers were requested

        Returns:
            Follower logins; entries without a login are skipped
        """
        if not isinstance(data, list):
            log_and_raise_api_error(
                TypeError(f"expected a list, got {type(data).__name__}"),
                url, identifier=username,
                context=f"Follower lookup for @{username} ({ErrorMessages.API_INVALID_RESPONSE})",
                error_class=TransientServiceFailure
            )

        followers = []
        for entry in data:
            login = entry.get('login') if isinstance(entry, dict) else None
            if not login or not isinstance(login, str):
                bt.logging.warning(f"Skipping follower entry without login for @{username}")
                continue
            followers.append(login)
        return followers
