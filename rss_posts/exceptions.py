class RSSFetchError(Exception):
    """Raised when an RSS/Atom feed or a post source cannot be fetched."""


class ParseError(Exception):
    """Raised when a source payload cannot be mapped into feed items."""
