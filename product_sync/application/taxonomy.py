"""Taxonomy flattener.

Turns the category assignments of an entry into full path strings,
e.g. "/Electronics/Computers". The tree root and the store root are
never part of a path, and inactive or unnamed categories are left out.
"""

from product_sync.catalog.models import CatalogEntry, Category
from product_sync.catalog.providers import CatalogEntryProvider

STORE_ROOT_LEVEL = 1
SEPARATOR = "/"


def build_category_string(path: list[Category]) -> str:
    """Build the display path of a category chain.

    Args:
        path: Categories ordered from the tree root down.

    Returns:
        Slash-prefixed path, or an empty string if no part is shown.
    """
    names = [
        c.name
        for c in path
        if c.level > STORE_ROOT_LEVEL and c.is_active and c.name
    ]
    if not names:
        return ""
    return SEPARATOR + SEPARATOR.join(names)


class TaxonomyFlattener:
    """Builds the category path strings of an entry."""

    def __init__(self, catalog: CatalogEntryProvider) -> None:
        self.catalog = catalog

    def flatten(self, entry: CatalogEntry) -> list[str]:
        """Get the full category paths of an entry.

        Args:
            entry: Catalog entry.

        Returns:
            Distinct non-empty path strings in first-assignment order.
        """
        paths: list[str] = []
        seen: set[str] = set()
        for category_id in entry.category_ids:
            path = build_category_string(self.catalog.get_category_path(category_id))
            if not path or path in seen:
                continue
            seen.add(path)
            paths.append(path)
        return paths
