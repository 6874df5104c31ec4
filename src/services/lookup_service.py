"""Word lookup service: orchestrates the dictionary lookup pipeline.

Pipeline: resolve URL → fetch page → DDO or SpanishDict parser → WordModel.
look_up_with_fallback walks an ordered list of attempts (infinitive marker
stripped, other dictionary) until one of them finds the word.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote, urlsplit, urlunsplit

from adapter.parser.ddo import DDO_BASE_URL, DDOPageParser
from adapter.parser.spanishdict import SPANISHDICT_BASE_URL, SpanishDictPageParser
from domain.model.errors import PageParserError, UnsupportedLanguageError
from domain.model.language import Language, SourceLanguage, get_language, other_languages
from domain.model.word import Context, Definition, Headword, Meaning, WordModel
from port.page_fetcher import PageFetcherPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupAttempt:
    """One step of the fallback sequence."""
    term: str
    language: Language


def resolve_language(language: "str | SourceLanguage | Language") -> Language:
    """Resolve a language name or enum to its Language.

    Raises:
        UnsupportedLanguageError: If no dictionary serves the language.
    """
    if isinstance(language, Language):
        return language
    resolved = get_language(language)
    if resolved is None:
        raise UnsupportedLanguageError(language)
    return resolved


def is_url(term: str) -> bool:
    return term.startswith(("http://", "https://"))


def build_lookup_url(term: str, language: Language) -> str:
    """Dictionary URL for a search term, or the term itself when it already is one.

    Pasted SpanishDict URLs lose their query string.
    """
    term = term.strip()
    if language.source is SourceLanguage.DANISH:
        if term.startswith(DDO_BASE_URL):
            return term
        return f"{DDO_BASE_URL}?query={quote(term, safe='')}"

    if term.startswith(SPANISHDICT_BASE_URL):
        parts = urlsplit(term)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return f"{SPANISHDICT_BASE_URL}{quote(term, safe='')}"


def build_lookup_attempts(term: str, language: Language) -> list[LookupAttempt]:
    """Ordered attempts: as given, without infinitive marker, then other dictionaries.

    A URL is only ever tried in the requested language.
    """
    term = term.strip()
    attempts = [LookupAttempt(term=term, language=language)]
    if is_url(term):
        return attempts

    stripped = language.strip_infinitive_marker(term)
    if stripped != term:
        attempts.append(LookupAttempt(term=stripped, language=language))

    for other in other_languages(language):
        attempts.append(LookupAttempt(term=term, language=other))
    return attempts


class LookupService:
    """Looks up words in DDO and SpanishDict and folds them into WordModels."""

    def __init__(
        self,
        page_fetcher: PageFetcherPort,
        ddo_parser_factory: Callable[[str], DDOPageParser] = DDOPageParser,
        spanishdict_parser: SpanishDictPageParser | None = None,
    ):
        self.page_fetcher = page_fetcher
        self.ddo_parser_factory = ddo_parser_factory
        self.spanishdict_parser = spanishdict_parser or SpanishDictPageParser()

    async def look_up_with_fallback(
        self, term: str, language: "str | SourceLanguage | Language",
    ) -> WordModel | None:
        """Try each fallback attempt in order; the first found word wins.

        Parse errors are not retried: they abort the whole lookup.
        """
        attempts = build_lookup_attempts(term, resolve_language(language))
        for number, attempt in enumerate(attempts, start=1):
            word_model = await self.look_up_word(attempt.term, attempt.language)
            if word_model is not None:
                if number > 1:
                    logger.info("Word found by fallback lookup", extra={
                        "term": term,
                        "attempt_term": attempt.term,
                        "language": attempt.language.name,
                        "attempt": number,
                    })
                return word_model
        return None

    async def look_up_word(
        self, term: str, language: "str | SourceLanguage | Language",
    ) -> WordModel | None:
        """Look up a term (or a dictionary URL) in one language's dictionary."""
        resolved = resolve_language(language)
        url = build_lookup_url(term, resolved)
        return await self.get_word_by_url(url, resolved)

    async def get_word_by_url(
        self, url: str, language: "str | SourceLanguage | Language",
    ) -> WordModel | None:
        """Download and parse a dictionary page.

        Returns:
            The WordModel, or None if the page or the word does not exist.

        Raises:
            UnsupportedLanguageError: If no dictionary serves the language.
            PageParserError: If the page structure is not recognized.
            PageFetchError: If the download fails for another reason than 404.
        """
        resolved = resolve_language(language)

        html = await self.page_fetcher.fetch_text(url)
        if not html:
            logger.info("Dictionary page not found", extra={
                "url": url, "language": resolved.name,
            })
            return None

        try:
            if resolved.source is SourceLanguage.DANISH:
                return self.parse_danish_word(html)
            return self.parse_spanish_word(html, url=url)
        except PageParserError as e:
            e.url = url
            logger.error("Cannot parse dictionary page", extra={
                "url": url,
                "language": resolved.name,
                "selector": e.selector,
                "error": str(e),
            })
            raise

    def parse_danish_word(self, html: str) -> WordModel:
        """Fold a DDO page into one Definition holding one Context."""
        parser = self.ddo_parser_factory(html)

        headword = parser.parse_headword()
        sound_url = parser.parse_sound()

        meanings = [
            Meaning(
                original=ddo_definition.meaning,
                alphabetical_position=str(position),
                tag=ddo_definition.tag,
                examples=ddo_definition.examples,
            )
            for position, ddo_definition in enumerate(parser.parse_definitions(), start=1)
        ]

        definition = Definition(
            headword=Headword(original=headword),
            part_of_speech=parser.parse_part_of_speech() or "",
            endings=parser.parse_endings() or "",
            contexts=[Context(context_en="", position="1", meanings=meanings)],
        )

        return WordModel(
            word=headword,
            source_language=SourceLanguage.DANISH,
            sound_url=sound_url,
            sound_file_name=f"{headword}.mp3" if sound_url else None,
            definitions=[definition],
            variations=parser.parse_variants(),
        )

    def parse_spanish_word(self, html: str, url: str | None = None) -> WordModel | None:
        """Map every SpanishDict neodict group to a Definition."""
        parser = self.spanishdict_parser

        word_obj = parser.parse_word_json(html)
        if word_obj is None:
            return None

        headword = parser.parse_headword(word_obj)
        sound_url = parser.parse_sound_url(word_obj)

        definitions = []
        for spanish_definition in parser.parse_definitions(word_obj):
            contexts = [
                Context(
                    context_en=spanish_context.context_en,
                    position=str(spanish_context.position),
                    meanings=[
                        Meaning(
                            original=spanish_meaning.original,
                            alphabetical_position=spanish_meaning.alphabetical_position,
                            image_url=spanish_meaning.image_url,
                            examples=spanish_meaning.examples,
                        )
                        for spanish_meaning in spanish_context.meanings
                    ],
                )
                for spanish_context in spanish_definition.contexts
            ]
            definitions.append(Definition(
                headword=Headword(original=spanish_definition.word_es),
                part_of_speech=spanish_definition.part_of_speech,
                endings="",
                contexts=contexts,
            ))

        if not definitions:
            logger.info("SpanishDict page has no definitions", extra={
                "url": url, "headword": headword,
            })
            return None

        return WordModel(
            word=headword,
            source_language=SourceLanguage.SPANISH,
            sound_url=sound_url,
            sound_file_name=f"{headword}.mp4" if sound_url else None,
            definitions=definitions,
        )
