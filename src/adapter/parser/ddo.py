"""DDO (Den Danske Ordbog, ordnet.dk) page parser.

Extracts headword, part of speech, endings, pronunciation, sound, numbered
definitions and variant links from a DDO dictionary page.

A DDOPageParser holds the document of one page and is constructed per
request; every method reads the document without modifying it.
"""

import logging
import re
from urllib.parse import urljoin

from bs4 import NavigableString, Tag

from adapter.parser.page_parser_base import (
    PageDocument,
    decode_text,
    find_ancestor,
    node_text,
    select_all,
    select_first,
)
from domain.model.ddo import DDODefinition
from domain.model.errors import PageParserError
from domain.model.word import Example, Variant, placeholder_examples

logger = logging.getLogger(__name__)

DDO_BASE_URL = "https://ordnet.dk/ddo/ordbog"

ENDINGS_SEPARATOR = " || "

# ── Selectors ────────────────────────────────────────────────

_HEADWORD_MATCH = "span.match"
_PART_OF_SPEECH = "span.tekstmedium.allow-glossing"
_ENDINGS = ":scope > span.tekstmedium.allow-glossing"
_PRONUNCIATION = ":scope > span > span.lydskrift"
_SOUND_LINK = ":scope > span > span > audio > div > a[href]"
_DEFINITION_PATHS = (
    ":scope > div > div > span > span.definition",
    # "Faste udtryk" pages nest definitions one level deeper
    ":scope > div > div > div > span > span.definition",
)
_DEFINITION_TAG = ":scope > div > span > span.stempelNoBorder"
_EXAMPLE_PATHS = (
    ":scope > div > div > span.citat",
    ":scope > div > div > div > span.citat",
)
_SEARCH_RESULT_BOX = ":scope > div > div.searchResultBox"
_VARIANT_LINKS = ":scope > div > a[href]"

_SENTENCE_END = (".", "!", "?")
_WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")
_SENSE_NUMBER = re.compile(r" ?(?<![(\d])(\d+)(?![\d)])")
_NBSP_MARKER = re.compile(r"\s*\xa0\s*")


class DDOPageParser:
    """Parser for a single DDO dictionary page."""

    def __init__(self, html: str | None):
        self._document = PageDocument.load(html)

    # ── Headword / part of speech ────────────────────────────

    def parse_headword(self) -> str:
        """Headword without superscript sense numbers (e.g. "høj" for "høj¹").

        Raises:
            PageParserError: If the page has no headword match span.
        """
        box_top = self._document.find_first_by_class("div", "definitionBoxTop")
        match = box_top.select_one(_HEADWORD_MATCH)
        if match is None:
            raise PageParserError(
                "Cannot find headword on DDO page",
                selector=f"div.definitionBoxTop {_HEADWORD_MATCH}",
            )

        text = node_text(match, exclude="span.super", when=_is_sense_number)
        return decode_text(text)

    def parse_part_of_speech(self) -> str | None:
        """Part of speech, or None for entries without one (e.g. "på højtryk")."""
        box_top = self._document.find_first_by_class("div", "definitionBoxTop")
        node = box_top.select_one(_PART_OF_SPEECH)
        if node is None:
            return None
        return decode_text(node.get_text()) or None

    # ── Endings ──────────────────────────────────────────────

    def parse_endings(self) -> str | None:
        """Inflection endings, alternatives joined with " || ".

        Segments are separated by "dividerDouble" spans. Inside a segment a
        discreet span is unwrapped together with the text right after it
        ("betydning 1: -ten, -ter"), and a discreet "eller" followed by another
        discreet span collapses into a single "|| <alternative>".
        """
        container = self._document.find_by_id("id-boj")
        if container is None:
            return None
        span = container.select_one(_ENDINGS)
        if span is None:
            return None

        segments = _split_on_dividers(span)
        if span.select_one("span.diskret") is not None:
            texts = [_merge_discreet_segment(segment) for segment in segments]
        else:
            texts = [_collapse_whitespace("".join(_text_of(n) for n in segment)) for segment in segments]

        endings = ENDINGS_SEPARATOR.join(text for text in texts if text)
        return decode_text(endings) or None

    # ── Pronunciation / sound ────────────────────────────────

    def parse_pronunciation(self) -> str | None:
        container = self._document.find_by_id("id-udt")
        if container is None:
            return None
        node = container.select_one(_PRONUNCIATION)
        if node is None:
            return None
        return decode_text(node.get_text()) or None

    def parse_sound(self) -> str | None:
        """URL of the first MP3 recording, or None when the page has no audio.

        Raises:
            PageParserError: If the audio link does not point to an MP3 file.
        """
        container = self._document.find_by_id("id-udt")
        if container is None:
            return None
        link = container.select_one(_SOUND_LINK)
        if link is None:
            return None

        sound_url = decode_text(link["href"])
        if not sound_url.endswith(".mp3"):
            logger.warning("DDO sound link is not an MP3 file", extra={
                "sound_url": sound_url,
                "selector": f"#id-udt {_SOUND_LINK}",
            })
            raise PageParserError(
                f"Sound URL '{sound_url}' does not end with .mp3",
                selector=f"#id-udt {_SOUND_LINK}",
            )
        return sound_url

    # ── Definitions ──────────────────────────────────────────

    def parse_definitions(self) -> list[DDODefinition]:
        """Numbered definitions with their usage tag and examples.

        Falls back to the "artikel" block used by "Faste udtryk" pages when
        the regular definitions container is missing.

        Raises:
            PageParserError: If no definitions container or definition is found.
        """
        container = self._document.find_by_id("content-betydninger")
        if container is None:
            container = self._document.find_first_by_class("div", "artikel")

        nodes = select_all(container, *_DEFINITION_PATHS)
        if not nodes:
            raise PageParserError(
                "Cannot find any definition on DDO page",
                selector=" | ".join(_DEFINITION_PATHS),
            )

        definitions = []
        for node in nodes:
            indent = find_ancestor(node, "div", "definitionIndent")
            definitions.append(DDODefinition(
                meaning=decode_text(node.get_text()),
                tag=_parse_tag(indent),
                examples=_parse_examples(indent),
            ))
        return definitions

    # ── Variants ─────────────────────────────────────────────

    def parse_variants(self) -> list[Variant]:
        """Links to related lemmas listed in the search result box.

        Raises:
            PageParserError: If the page has no search result box.
        """
        expanded = self._document.find_by_id("opslagsordBox_expanded")
        box = select_first(expanded, _SEARCH_RESULT_BOX) if expanded is not None else None
        if box is None:
            raise PageParserError(
                "Cannot find variants box on DDO page",
                selector=f"#opslagsordBox_expanded {_SEARCH_RESULT_BOX}",
            )

        variants = []
        for anchor in box.select(_VARIANT_LINKS):
            variants.append(Variant(
                word=format_variant_label(anchor.parent.get_text()),
                url=urljoin(DDO_BASE_URL, decode_text(anchor["href"])),
            ))
        return variants


# ── Text helpers ─────────────────────────────────────────────


def format_variant_label(text: str) -> str:
    """Normalize a variant line: "høj 1 sb." → "høj(1) sb.", "skat\\xa0skatte vb." → "skat -> skatte vb."."""
    text = _collapse_whitespace(text)
    text = _SENSE_NUMBER.sub(r"(\1)", text, count=1)
    text = _NBSP_MARKER.sub(" -> ", text)
    return decode_text(text)


def _collapse_whitespace(text: str) -> str:
    # Non-breaking spaces are kept: they mark "form -> lemma" variants
    return _WHITESPACE_RUN.sub(" ", text).strip(" \t\r\n")


def _is_sense_number(node: Tag) -> bool:
    return node.get_text().strip().isdigit()


def _is_discreet(node) -> bool:
    return isinstance(node, Tag) and node.name == "span" and "diskret" in node.get("class", [])


def _is_divider(node) -> bool:
    return isinstance(node, Tag) and "dividerDouble" in node.get("class", [])


def _text_of(node) -> str:
    return node.get_text() if isinstance(node, Tag) else str(node)


def _split_on_dividers(span: Tag) -> list[list]:
    segments: list[list] = [[]]
    for child in span.children:
        if _is_divider(child):
            segments.append([])
        else:
            segments[-1].append(child)
    return segments


def _next_non_blank(nodes: list, start: int) -> int | None:
    for index in range(start, len(nodes)):
        if isinstance(nodes[index], NavigableString) and not str(nodes[index]).strip():
            continue
        return index
    return None


def _merge_discreet_segment(nodes: list) -> str:
    parts: list[str] = []
    index = 0
    while index < len(nodes):
        node = nodes[index]
        if not _is_discreet(node):
            parts.append(_text_of(node))
            index += 1
            continue

        text = node.get_text()
        partner = _next_non_blank(nodes, index + 1)
        if text.strip() == "eller" and partner is not None and _is_discreet(nodes[partner]):
            parts.append("|| " + nodes[partner].get_text())
            index = partner + 1
            continue

        trailing = ""
        if index + 1 < len(nodes) and isinstance(nodes[index + 1], NavigableString):
            trailing = str(nodes[index + 1])
            index += 1
        parts.append(f"{text.strip()} {trailing.strip()}".strip())
        index += 1

    return _collapse_whitespace("".join(parts))


def _parse_tag(indent: Tag | None) -> str | None:
    if indent is None:
        return None
    node = indent.select_one(_DEFINITION_TAG)
    if node is None:
        return None
    return decode_text(node.get_text()) or None


def _parse_examples(indent: Tag | None) -> list[Example]:
    if indent is None:
        return placeholder_examples()

    examples = []
    for node in select_all(indent, *_EXAMPLE_PATHS):
        text = decode_text(node.get_text())
        if not text:
            continue
        if not text.endswith(_SENTENCE_END):
            text += "."
        examples.append(Example(original=text))
    return examples or placeholder_examples()
