from dataclasses import dataclass
from enum import IntEnum

from docsim.globals import (
    DEFAULT_CONFIG,
    HIGH_THRESHOLD,
    LIGHT_THRESHOLD,
    MODERATE_THRESHOLD,
    SimHashConfig,
)
from docsim.simhash import fingerprint_text, hamming_distance


class Verdict(IntEnum):
    # higher is more similar
    LOW = 0
    LIGHT = 1
    MODERATE = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return _VERDICT_LABELS[self]


_VERDICT_LABELS = {
    Verdict.HIGH: "highly similar / possible plagiarism",
    Verdict.MODERATE: "moderately similar / warrants review",
    Verdict.LIGHT: "lightly similar / possible paraphrase",
    Verdict.LOW: "low similarity / likely original",
}


@dataclass(frozen=True)
class SimilarityResult:
    difference_score: int  # differing fingerprint bits
    similarity_ratio: float
    verdict: Verdict

    @property
    def percentage(self) -> str:
        return f"{self.similarity_ratio * 100:.2f}%"


def classify(ratio: float) -> Verdict:
    if ratio >= HIGH_THRESHOLD:
        return Verdict.HIGH
    if ratio >= MODERATE_THRESHOLD:
        return Verdict.MODERATE
    if ratio >= LIGHT_THRESHOLD:
        return Verdict.LIGHT
    return Verdict.LOW


def score(fp_a: int, fp_b: int, config: SimHashConfig = DEFAULT_CONFIG) -> SimilarityResult:
    difference = hamming_distance(fp_a, fp_b, config.bit_length)
    ratio = 1.0 - difference / config.bit_length
    return SimilarityResult(
        difference_score=difference,
        similarity_ratio=ratio,
        verdict=classify(ratio),
    )


def compare(
    text_a: str | None, text_b: str | None, config: SimHashConfig = DEFAULT_CONFIG
) -> SimilarityResult:
    """Fingerprints both texts and scores them against each other."""
    return score(fingerprint_text(text_a, config), fingerprint_text(text_b, config), config)
