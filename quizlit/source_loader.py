"""Reading plain-text study material from disk."""

import logging
from pathlib import Path

import chardet

from quizlit.errors import ContentError

logger = logging.getLogger(__name__)

MIN_DETECTION_CONFIDENCE = 0.7


def _decode(raw_bytes: bytes, path: Path) -> str:
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding")
    confidence = detected.get("confidence") or 0
    if not encoding:
        raise ContentError(f"Could not detect a text encoding for {path}")
    if confidence < MIN_DETECTION_CONFIDENCE:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ContentError(f"Failed to decode {path} as {encoding}: {e}") from e


def read_source_text(file_path: str | Path) -> str:
    """Load study text to generate a quiz from.

    UTF-8 is tried first, then the encoding chardet detects. Binary files
    and files without any text are rejected, since they cannot yield
    questions.

    Args:
        file_path: Path to a plain text file.

    Returns:
        The decoded file content.

    Raises:
        FileNotFoundError: If file_path does not exist.
        ContentError: If the file is binary, undecodable or blank.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    raw_bytes = path.read_bytes()
    if b"\x00" in raw_bytes:
        raise ContentError(f"{path} looks like a binary file, expected plain text")

    text = _decode(raw_bytes, path)
    if not text.strip():
        raise ContentError(f"{path} contains no text")

    logger.info("Loaded %d characters of source text from %s", len(text), path)
    return text
