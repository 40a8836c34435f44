"""Resolvers and hashing used per file."""
from .category import CategoryResolver, extension_of
from .date_resolver import DateBucket, DateResolver
from .hash_engine import Sha256HashEngine, sha256_file

__all__ = [
    "CategoryResolver",
    "DateBucket",
    "DateResolver",
    "Sha256HashEngine",
    "extension_of",
    "sha256_file",
]
