import os

from docsim.globals import ENCODINGS


class DocumentNotFoundError(FileNotFoundError):
    pass


class UnsupportedEncodingError(ValueError):
    def __init__(self, path: str, encodings: tuple[str, ...]):
        super().__init__(
            f"Could not decode {path} with any of: {', '.join(encodings)}"
        )
        self.path = path
        self.encodings = encodings


def verify_file(path: str) -> None:
    """Raises DocumentNotFoundError unless path is an existing regular file"""
    if not os.path.isfile(path):
        raise DocumentNotFoundError(f"Cannot access file: {path}")


def decode_bytes(data: bytes, encodings: tuple[str, ...] = ENCODINGS) -> str | None:
    """Returns the first strict decode of data, or None if every encoding fails"""
    for encoding in encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return None


def load_document_text(path: str, encodings: tuple[str, ...] = ENCODINGS) -> str:
    """Returns the text of a document whose encoding is not known up front.

    Encodings are tried in order and the first clean decode wins, so the
    result is a best guess rather than a detected encoding. latin-1 accepts
    any byte sequence, which makes it a catch-all when left last.
    """
    verify_file(path)
    with open(path, "rb") as f:
        data = f.read()

    text = decode_bytes(data, encodings)
    if text is None:
        raise UnsupportedEncodingError(path, tuple(encodings))
    return text
