# ABOUTME: Phrase-substitution templating of bulletins into other languages.
# ABOUTME: Exports the engine, its phrase tables, language profiles, and cache.

from gig_guide.templating.cache import TranslationCache
from gig_guide.templating.engine import PhraseTemplatingEngine
from gig_guide.templating.phrases import PhraseSource, StaticPhraseTable
from gig_guide.templating.profiles import PROFILES, LanguageProfile, get_profile

__all__ = [
    "PROFILES",
    "LanguageProfile",
    "PhraseSource",
    "PhraseTemplatingEngine",
    "StaticPhraseTable",
    "TranslationCache",
    "get_profile",
]
