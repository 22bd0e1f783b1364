# ABOUTME: Process-lifetime cache of translated bulletins.
# ABOUTME: Keyed by a content hash of the input text plus the target language.

import hashlib
import threading


class TranslationCache:
    """Unbounded, never-invalidated translation cache safe for concurrent writers."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(text: str, language: str) -> str:
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
        return f"{digest}:{language}"

    def get(self, text: str, language: str) -> str | None:
        with self._lock:
            return self._entries.get(self.key(text, language))

    def put(self, text: str, language: str, translated: str) -> None:
        with self._lock:
            self._entries[self.key(text, language)] = translated

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
