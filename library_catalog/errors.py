class CatalogError(Exception):
    """Base error for the library catalog."""


class AuthorStoreError(CatalogError):
    """The author store could not complete a query or write."""


class InvalidSortError(CatalogError, ValueError):
    def __init__(self, field, direction):
        self.field = field
        self.direction = direction
        super().__init__(f"Cannot sort authors by {field!r} ({direction!r})")
