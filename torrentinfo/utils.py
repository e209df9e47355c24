import os
import hashlib
import logging

SIZE_SUFFIXES = "KMGTPEZY"


def _log_level():
    """Reads the log level from TORRENTINFO_LOG_LEVEL, defaulting to WARNING."""
    level = logging.getLevelName(os.environ.get("TORRENTINFO_LOG_LEVEL", "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


# Logs go to stderr so they never mix with the rendered output
logging.basicConfig(
    level=_log_level(),
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger("torrentinfo")


def sha1_hash(data: bytes) -> bytes:
    """Computes the SHA-1 hash of the given binary data."""
    return hashlib.sha1(data).digest()


def format_bytes(size: int) -> str:
    """
    Converts a byte count into a binary-unit string.
    Values on a power-of-1024 boundary move up to the next unit,
    so 1024 is '1.00 KB' rather than '1024 B'.
    """
    if size < 1024:
        return f"{size} B"

    value = float(size)
    i = 0
    while value >= 1024 and i < len(SIZE_SUFFIXES):
        value /= 1024
        i += 1

    return f"{value:.2f} {SIZE_SUFFIXES[i - 1]}B"
