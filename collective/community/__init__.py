"""Community class wrappers."""

from collective.community.builder import CommunityBuilder

__all__ = ["CommunityBuilder"]
