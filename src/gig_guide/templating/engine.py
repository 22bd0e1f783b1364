# ABOUTME: Re-renders an English bulletin into another language by phrase substitution.
# ABOUTME: Parses the text, localizes each section, reassembles, and applies post-pass fixes.

import re
from collections.abc import Mapping, Sequence

import structlog

from gig_guide.bulletin.editions import Edition
from gig_guide.bulletin.parser import FOOTER_SENTENCE_RE, extract_sections, parse_event_block
from gig_guide.bulletin.text import (
    GIGS_HEADER,
    HOW_TO_USE_HEADER,
    HOW_TO_USE_LINES,
    assemble,
    format_event_block,
    heading_line,
    section_line,
)
from gig_guide.languages import SOURCE_LANGUAGE
from gig_guide.templating.cache import TranslationCache
from gig_guide.templating.phrases import PhraseSource, StaticPhraseTable
from gig_guide.templating.profiles import PROFILES, LanguageProfile

log = structlog.get_logger()


def fallback_text(text: str, language: str) -> str:
    """Untranslated text tagged with the requested language."""
    return f"[{language}]\n\n{text}"


class PhraseTemplatingEngine:
    """Translates bulletins through static phrase tables and language profiles."""

    def __init__(
        self,
        phrases: PhraseSource | None = None,
        profiles: Mapping[str, LanguageProfile] | None = None,
        cache: TranslationCache | None = None,
        source_language: str = SOURCE_LANGUAGE,
    ) -> None:
        self.phrases = phrases or StaticPhraseTable()
        self.profiles = PROFILES if profiles is None else profiles
        self.cache = cache if cache is not None else TranslationCache()
        self.source_language = source_language

    def translate(self, text: str, target_language: str) -> str:
        """Translate a rendered bulletin. Never raises.

        Returns the input unchanged for the source language. Unsupported
        languages, malformed input and unexpected errors all yield the
        original text behind a bracketed language tag.
        """
        if target_language == self.source_language:
            return text

        try:
            cached = self.cache.get(text, target_language)
            if cached is not None:
                log.debug("translation_cache_hit", language=target_language)
                return cached
            translated = self._translate(text, target_language)
        except Exception:
            log.exception("translation_failed", language=target_language)
            return fallback_text(text, target_language)

        if translated is None:
            return fallback_text(text, target_language)

        self.cache.put(text, target_language, translated)
        return translated

    def editions(self, text: str, languages: Sequence[str]) -> list[Edition]:
        """One edition per language, always starting with the source language."""
        ordered = [self.source_language]
        for code in languages:
            if code not in ordered:
                ordered.append(code)
        return [Edition(language=code, text=self.translate(text, code)) for code in ordered]

    def translate_paragraph(self, paragraph: str, language: str) -> str:
        """Exact match, else longest-first substring replacement, then proper nouns."""
        if not paragraph:
            return paragraph

        exact = self.phrases.lookup(paragraph, language)
        if exact is not None:
            return exact

        result = paragraph
        for phrase, replacement in self.phrases.phrases(language):
            if phrase in result:
                result = result.replace(phrase, replacement)

        for noun, replacement in self.phrases.proper_nouns(language).items():
            pattern = re.compile(rf"\b{re.escape(noun)}\b", re.ASCII)
            result = pattern.sub(lambda _match, value=replacement: value, result)

        return result

    def _translate(self, text: str, language: str) -> str | None:
        profile = self.profiles.get(language)
        if profile is None:
            log.warning("translation_language_unsupported", language=language)
            return None

        sections = extract_sections(text)
        if sections.is_empty:
            log.warning("translation_input_malformed", language=language)
            return None

        header = profile.header_template.format(date=sections.date_label)
        description = self.translate_paragraph(sections.description, language)
        gigs_header = self._section_header(
            "gigs", sections.gigs_header or section_line(GIGS_HEADER), profile
        )
        blocks = [self._translate_block(raw, profile) for raw in sections.event_blocks_raw]
        how_to_use_header = self._section_header(
            "how_to_use", sections.how_to_use_header or heading_line(HOW_TO_USE_HEADER), profile
        )
        how_to_use_lines = [
            self.translate_paragraph(line, language)
            for line in (sections.how_to_use_lines or HOW_TO_USE_LINES)
        ]

        footer_lines = [
            line.strip() for line in sections.footer_raw.split("\n") if line.strip()
        ]
        if sections.subscriber_email:
            footer_lines = [
                self.translate_paragraph(line, language)
                for line in footer_lines
                if not FOOTER_SENTENCE_RE.search(line)
            ]
            footer_lines.insert(
                0,
                profile.footer_template.format(
                    name=sections.subscriber_name, email=sections.subscriber_email
                ),
            )
        else:
            footer_lines = [self.translate_paragraph(line, language) for line in footer_lines]

        assembled = assemble(
            header=header,
            description=description,
            gigs_header=gigs_header,
            blocks=blocks,
            how_to_use_header=how_to_use_header,
            how_to_use_lines=how_to_use_lines,
            footer_lines=footer_lines,
        )
        log.debug("bulletin_translated", language=language, events=len(blocks))
        return profile.post_process(assembled)

    def _section_header(self, key: str, english: str, profile: LanguageProfile) -> str:
        fixed = profile.section_headers.get(key)
        if fixed is not None:
            return fixed
        return self.translate_paragraph(english, profile.code)

    def _translate_block(self, raw: str, profile: LanguageProfile) -> str:
        block = parse_event_block(raw)
        if block is None:
            return raw

        language = profile.code
        localized = block.model_copy(
            update={
                "distance_label": self.translate_paragraph(block.distance_label, language),
                "time_label": self._term(block.time_label, language),
                "price_label": self._term(block.price_label, language),
            }
        )
        return format_event_block(localized, qr_label=profile.qr_label)

    def _term(self, value: str, language: str) -> str:
        return self.phrases.lookup(value, language) or value
