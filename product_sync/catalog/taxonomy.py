"""Category tree.

Holds the store category hierarchy and answers root-to-leaf path
queries. The tree mirrors the catalog's layout:

    level 0 - tree root (never shown)
    level 1 - store root, e.g. "Default Category" (never shown)
    level 2+ - storefront categories, e.g. "Electronics > Computers"
"""

from collections.abc import Iterable

from product_sync.catalog.models import Category


class CategoryTree:
    """In-memory category hierarchy.

    Example usage:
        tree = CategoryTree([
            Category(id=1, name="Root", level=0),
            Category(id=2, name="Default Category", parent_id=1, level=1),
            Category(id=3, name="Electronics", parent_id=2, level=2),
        ])
        [c.name for c in tree.path_to(3)]
        # ["Root", "Default Category", "Electronics"]
    """

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        """Initialize tree with categories.

        Args:
            categories: Category nodes in any order.
        """
        self._categories: dict[int, Category] = {}
        for category in categories:
            self.add(category)

    def add(self, category: Category) -> None:
        """Add a category node.

        Args:
            category: Category to add; replaces an existing node with the same ID.
        """
        self._categories[category.id] = category

    def get_by_id(self, category_id: int) -> Category | None:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            Category if found, None otherwise.
        """
        return self._categories.get(category_id)

    def path_to(self, category_id: int) -> list[Category]:
        """Get the chain of categories from the tree root to a category.

        Missing parents end the walk, so a dangling node yields a partial
        path rather than an error.

        Args:
            category_id: Leaf category ID.

        Returns:
            Categories ordered root first; empty if the ID is unknown.
        """
        path: list[Category] = []
        seen: set[int] = set()
        current = self._categories.get(category_id)
        while current is not None and current.id not in seen:
            seen.add(current.id)
            path.append(current)
            if current.parent_id is None:
                break
            current = self._categories.get(current.parent_id)
        path.reverse()
        return path

    def __len__(self) -> int:
        return len(self._categories)
