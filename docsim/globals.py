from dataclasses import dataclass

# Fingerprint vars
NUM_BITS = 64
HASH_SEED = 5381
TOKEN_PATTERN = r"[\u4e00-\u9fa5a-zA-Z0-9]+"
# Decoding order for input documents, first clean decode wins
ENCODINGS = ("utf-8", "gbk", "gb2312", "utf-16", "latin-1")
# Verdict lower bounds (inclusive)
HIGH_THRESHOLD = 0.80
MODERATE_THRESHOLD = 0.50
LIGHT_THRESHOLD = 0.30
# Report formatting
REPORT_TITLE = "Document similarity report"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class SimHashConfig:
    # fixed parameters for tokenizing, hashing and fingerprinting
    bit_length: int = NUM_BITS
    hash_seed: int = HASH_SEED
    token_pattern: str = TOKEN_PATTERN

    @property
    def mask(self) -> int:
        return (1 << self.bit_length) - 1


DEFAULT_CONFIG = SimHashConfig()
