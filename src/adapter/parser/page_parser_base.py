"""Page loading and traversal helpers shared by the HTML parsers.

Every structural query a parser makes goes through these helpers
(find by id, find by class, relative CSS paths, nearest ancestor), so the
parsers only name selectors and never walk the tree by hand.
"""

import copy
import html
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from domain.model.errors import InvalidInputError, PageParserError

HTML_PARSER = "html.parser"


def decode_text(text: str | None) -> str:
    """Decode HTML entities and trim surrounding whitespace."""
    if not text:
        return ""
    return html.unescape(text).strip()


def class_selector(tag: str, class_name: str) -> str:
    """CSS selector for ``tag`` carrying every class in ``class_name``."""
    return tag + "".join(f".{name}" for name in class_name.split())


def select_first(node: Tag, *paths: str) -> Tag | None:
    """First element matching any of ``paths``, tried in order."""
    for path in paths:
        found = node.select_one(path)
        if found is not None:
            return found
    return None


def select_all(node: Tag, *paths: str) -> list[Tag]:
    """Matches of the first path in ``paths`` that matches anything."""
    for path in paths:
        found = node.select(path)
        if found:
            return found
    return []


def find_ancestor(node: Tag, tag: str, class_name: str) -> Tag | None:
    """Nearest ancestor ``tag`` element carrying ``class_name``."""
    return node.find_parent(tag, class_=class_name)


def node_text(
    node: Tag,
    exclude: str | None = None,
    when: Callable[[Tag], bool] | None = None,
) -> str:
    """Text content of ``node`` with the ``exclude`` descendants left out.

    ``when`` narrows which matches of ``exclude`` are dropped. The
    document itself is never modified; removals happen on a copy.
    """
    if exclude is None:
        return node.get_text()
    detached = copy.copy(node)
    for unwanted in detached.select(exclude):
        if when is None or when(unwanted):
            unwanted.decompose()
    return detached.get_text()


class PageDocument:
    """A loaded HTML page, scoped to a single request."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def load(cls, content: str | None) -> "PageDocument":
        """Parse ``content`` into a document.

        Raises:
            InvalidInputError: If the content is None or blank.
        """
        if not content or not content.strip():
            raise InvalidInputError("HTML content must not be empty")
        return cls(BeautifulSoup(content, HTML_PARSER))

    def find_by_id(self, element_id: str) -> Tag | None:
        return self.soup.find(id=element_id)

    def find_first_by_class(self, tag: str, class_name: str) -> Tag:
        """First ``tag`` element with ``class_name``.

        Raises:
            PageParserError: If the page has no such element.
        """
        selector = class_selector(tag, class_name)
        found = self.soup.select_one(selector)
        if found is None:
            raise PageParserError(
                f"Cannot find any element '{tag}' with class '{class_name}'",
                selector=selector,
            )
        return found

    def find_all_by_class(self, tag: str, class_name: str) -> list[Tag]:
        """All ``tag`` elements with ``class_name``, in document order.

        Raises:
            PageParserError: If the page has no such element.
        """
        selector = class_selector(tag, class_name)
        found = self.soup.select(selector)
        if not found:
            raise PageParserError(
                f"Cannot find any element '{tag}' with class '{class_name}'",
                selector=selector,
            )
        return found

    def find_all(self, tag: str) -> list[Tag]:
        return self.soup.find_all(tag)
