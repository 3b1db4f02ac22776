"""
Abstract base class for follower directory providers.

Defines the interface that all follower provider implementations must follow,
so the directory service behind the FollowerClient can be swapped or faked.
"""
from abc import ABC, abstractmethod
from typing import List


class FollowerProvider(ABC):
    """
    Interface that all follower providers must implement.

    Providers handle API-specific communication and response parsing and
    return follower identifiers exactly as the service reports them.
    """

    @abstractmethod
    def __init__(self, api_key: str, timeout: float = 30.0, per_page: int = 30):
        """
        Initialize provider with credentials and configuration.

        Args:
            api_key: Credential used to authorize against the service
            timeout: Request timeout in seconds (default: 30.0)
            per_page: Page size requested from the service (default: 30)
        """
        pass

    @abstractmethod
    def fetch_followers(self, username: str) -> List[str]:
        """
        Fetch the first page of followers for a user.

        No pagination is performed: the first page returned by the service is
        the follower list for this run.

        Args:
            username: Identifier to fetch followers for

        Returns:
            List of follower identifiers in the order the service returned them

        Raises:
            AuthorizationFailure: Credential missing or rejected
            TransientServiceFailure: Timeout, network, rate limit or server error
            IdentifierNotFound: The service does not know the username
            ResolutionError: Any other failed request
        """
        pass

    @abstractmethod
    def validate_api_key(self) -> bool:
        """
        Validate that the credential is usable for this provider.

        Returns:
            True if the credential has a valid format, False otherwise
        """
        pass
