"""
API clients for the follower directory service.

Contains the provider interface, the GitHub implementation and the resolver
used by connection runs.
"""

from .follower_provider import FollowerProvider
from .github_provider import GitHubProvider
from .follower_client import FollowerClient

__all__ = ['FollowerProvider', 'GitHubProvider', 'FollowerClient']
