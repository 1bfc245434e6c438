from collections import defaultdict

from nltk.tokenize import RegexpTokenizer

from docsim.globals import DEFAULT_CONFIG, SimHashConfig


def tokenize(text: str | None, config: SimHashConfig = DEFAULT_CONFIG) -> list[str]:
    # every CJK ideograph / ASCII alphanumeric run, lowercased, in document order
    if not text or not text.strip():
        return []

    tokenizer = RegexpTokenizer(config.token_pattern)
    return [raw.lower() for raw in tokenizer.tokenize(text)]


def count_tokens(tokens: list[str]) -> dict[str, int]:
    # token -> number of occurrences
    counts: defaultdict[str, int] = defaultdict(int)
    for token in tokens:
        counts[token] += 1
    return dict(counts)
