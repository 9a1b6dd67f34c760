import re
from collections.abc import Iterable

from clausescan.config.settings import Settings

_ALPHA_TOKEN = re.compile(r"[a-zA-Z]+")

LEGAL_MARKER_WORDS: tuple[str, ...] = (
    "agreement",
    "party",
    "parties",
    "shall",
    "contract",
    "terms",
    "conditions",
    "liability",
    "payment",
    "termination",
    "clause",
    "section",
    "article",
    "hereby",
    "whereas",
    "therefore",
)


class ReadabilityClassifier:
    """Decides whether natively extracted text is legible enough to keep.

    The share of purely alphabetic tokens is the main signal. Legal documents
    full of numbering and parentheticals get a lower bar when they mention at
    least one marker word.
    """

    def __init__(
        self,
        *,
        min_length: int = 100,
        ratio_threshold: float = 0.30,
        domain_ratio_threshold: float = 0.15,
        marker_words: Iterable[str] = LEGAL_MARKER_WORDS,
    ) -> None:
        self._min_length = min_length
        self._ratio_threshold = ratio_threshold
        self._domain_ratio_threshold = domain_ratio_threshold
        self._marker_words = tuple(word.lower() for word in marker_words)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReadabilityClassifier":
        return cls(
            min_length=settings.readability_min_length,
            ratio_threshold=settings.readability_ratio_threshold,
            domain_ratio_threshold=settings.readability_domain_ratio_threshold,
        )

    def is_readable(self, text: str) -> bool:
        if len(text) < self._min_length:
            return False
        ratio = self.readable_ratio(text)
        if ratio > self._ratio_threshold:
            return True
        return self.has_marker_word(text) and ratio > self._domain_ratio_threshold

    @staticmethod
    def readable_ratio(text: str) -> float:
        """Fraction of tokens longer than two chars that are letters only."""
        words = [word for word in text.split() if len(word) > 2]
        readable = [word for word in words if _ALPHA_TOKEN.fullmatch(word)]
        return len(readable) / max(1, len(words))

    def has_marker_word(self, text: str) -> bool:
        lowered = text.lower()
        return any(word in lowered for word in self._marker_words)
