"""Rewrite declaration for content type and taxonomy registration."""

import copy
from typing import Any


class Rewrite:
    """
    URL rewrite settings.

    No key has a default: get() returns only the keys that were explicitly set,
    so the host applies its own defaults for the rest.
    """

    def __init__(self) -> None:
        self._args: dict[str, Any] = {}

    def set_slug(self, slug: str) -> "Rewrite":
        self._args["slug"] = slug
        return self

    def set_with_front(self, with_front: bool) -> "Rewrite":
        """Whether permalinks are prefixed with the host's front base."""
        self._args["with_front"] = with_front
        return self

    def set_feeds(self, feeds: bool) -> "Rewrite":
        self._args["feeds"] = feeds
        return self

    def set_pages(self, pages: bool) -> "Rewrite":
        self._args["pages"] = pages
        return self

    def set_ep_mask(self, ep_mask: int | str) -> "Rewrite":
        self._args["ep_mask"] = ep_mask
        return self

    def set_hierarchical(self, hierarchical: bool) -> "Rewrite":
        """Allow hierarchical URLs (taxonomy rewrites only)."""
        self._args["hierarchical"] = hierarchical
        return self

    def get(self) -> dict[str, Any]:
        return copy.deepcopy(self._args)
