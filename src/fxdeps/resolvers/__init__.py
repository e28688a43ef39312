"""Repository resolvers."""

from .base import RepositoryResolver
from .chain import ResolverChain, default_chain
from .remote_index import RemoteIndexResolver

__all__ = [
    "RepositoryResolver",
    "RemoteIndexResolver",
    "ResolverChain",
    "default_chain",
]
