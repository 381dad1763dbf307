"""Builders for soundalike word groups."""

from .disjoint_set import DisjointSet
from .group_builder import GroupBuilder
from .similar import find_similar_groups
from .word_groups import WordGroups

__all__ = ["DisjointSet", "GroupBuilder", "WordGroups", "find_similar_groups"]
