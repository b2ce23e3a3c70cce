"""
Application-layer exceptions.

These exceptions are raised by infrastructure adapters and handled by the
application layer; pure domain functions never raise them.
"""


class StoreError(Exception):
    """Error reading from or writing to the persisted workout store.

    Raised for underlying database failures (locked or corrupt file,
    constraint violations, I/O errors). Recoverable: callers may retry.
    """

    pass


class CatalogLoadError(Exception):
    """Error loading the exercise catalog.

    Raised when the catalog source is missing, unreadable or malformed.
    The application keeps working with identifiers in place of names.
    """

    pass
