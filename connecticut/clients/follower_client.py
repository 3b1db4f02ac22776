"""
Follower resolver: turns an identifier and a credential into a follower set.

Wraps a FollowerProvider, creating one per credential and reusing it while the
credential is unchanged.
"""

from typing import Optional, Set, Type
import bittensor as bt

from connecticut.utils.config import (
    GITHUB_TOKEN,
    GITHUB_REQUEST_TIMEOUT,
    FOLLOWERS_PER_PAGE
)
from connecticut.utils.error_handling import (
    AuthorizationFailure,
    ErrorMessages,
    log_and_raise_validation_error
)
from .follower_provider import FollowerProvider
from .github_provider import GitHubProvider


class FollowerClient:
    """
    Resolves the follower set of one identifier at a time.

    Each call issues exactly one request for the first page of followers.
    Failures propagate as ResolutionError subclasses; there is no retry.
    """

    def __init__(self, provider_class: Type[FollowerProvider] = GitHubProvider,
                 timeout: Optional[float] = None, per_page: Optional[int] = None):
        """Initialize client.

        Args:
            provider_class: FollowerProvider implementation to use (default: GitHubProvider)
            timeout: Request timeout in seconds (default: GITHUB_REQUEST_TIMEOUT)
            per_page: Page size for the single page read (default: FOLLOWERS_PER_PAGE)
        """
        self.provider_class = provider_class
        self.timeout = timeout if timeout is not None else GITHUB_REQUEST_TIMEOUT
        self.per_page = per_page if per_page is not None else FOLLOWERS_PER_PAGE
        self._provider: Optional[FollowerProvider] = None
        self._provider_key: Optional[str] = None

    def _get_provider(self, credential: Optional[str]) -> FollowerProvider:
        credential = (credential or GITHUB_TOKEN or "").strip()
        if not credential:
            raise AuthorizationFailure(ErrorMessages.CREDENTIALS_MISSING)

        if self._provider is None or self._provider_key != credential:
            provider = self.provider_class(credential, timeout=self.timeout, per_page=self.per_page)
            if not provider.validate_api_key():
                raise AuthorizationFailure(ErrorMessages.CREDENTIALS_REJECTED)
            self._provider = provider
            self._provider_key = credential
            bt.logging.debug(f"Created {self.provider_class.__name__} for follower lookups")

        return self._provider

    def resolve(self, identifier: str, credential: Optional[str] = None) -> Set[str]:
        """
        Fetch the follower set for an identifier.

        Args:
            identifier: Non-empty account identifier
            credential: Token for the directory service (default: GITHUB_TOKEN)

        Returns:
            Set of follower identifiers from the first page of results

        Raises:
            ValueError: If identifier is blank
            ResolutionError: If the lookup fails (see FollowerProvider.fetch_followers)
        """
        if not identifier or not identifier.strip():
            log_and_raise_validation_error("Identifier must be a non-empty string", data=identifier)

        try:
            provider = self._get_provider(credential)
        except AuthorizationFailure as e:
            e.identifier = identifier
            bt.logging.error(f"Cannot resolve followers for @{identifier}: {e}")
            raise

        followers = set(provider.fetch_followers(identifier))
        bt.logging.debug(f"Resolved {len(followers)} followers for @{identifier}")
        return followers
