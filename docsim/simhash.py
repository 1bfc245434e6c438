from docsim.globals import DEFAULT_CONFIG, SimHashConfig
from docsim.tokenizer import count_tokens, tokenize


def token_hash(token: str, config: SimHashConfig = DEFAULT_CONFIG) -> int:
    # seeded rolling hash, wraps like a 64-bit register
    if not token:
        return 0
    h = config.hash_seed
    for ch in token:
        h = ((h * 33 + h) + ord(ch)) & config.mask
    return h


def compute_simhash(tokens: list[str], config: SimHashConfig = DEFAULT_CONFIG) -> int:
    # compute a SimHash fingerprint from a document's tokens
    if not tokens:
        return 0

    num_bits = config.bit_length
    # V[0] votes for the most significant bit
    V = [0] * num_bits
    for term, weight in count_tokens(tokens).items():
        h = token_hash(term, config)
        for i in range(num_bits):
            if (h >> (num_bits - 1 - i)) & 1:
                V[i] += weight
            else:
                V[i] -= weight

    fingerprint = 0
    for i in range(num_bits):
        # a tied vote leaves the bit at 0
        if V[i] > 0:
            fingerprint |= 1 << (num_bits - 1 - i)
    return fingerprint


def fingerprint_text(text: str | None, config: SimHashConfig = DEFAULT_CONFIG) -> int:
    if not text or not text.strip():
        return 0
    return compute_simhash(tokenize(text, config), config)


def hamming_distance(a: int, b: int, bits: int = 64) -> int:
    # return the number of differing bits between two fingerprints
    x = (a ^ b) & ((1 << bits) - 1)
    n = 0
    while x:
        x &= x - 1
        n += 1
    return n
