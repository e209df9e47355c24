from collections import namedtuple
from datetime import datetime, timezone

from torrentinfo.bencoding import Decoder, Encoder
from torrentinfo.utils import sha1_hash, format_bytes, logger

PIECE_HASH_SIZE = 20

TorrentFile = namedtuple("TorrentFile", ["path", "length"])


class TorrentError(ValueError):
    """Raised when decoded bencode does not describe a valid torrent."""


class Torrent:
    """Read-only view over the metainfo of a .torrent file."""

    def __init__(self, meta_info):
        if not isinstance(meta_info, dict):
            raise TorrentError("Torrent root must be a dictionary")
        self.meta_info = meta_info

        # 1. Info Dictionary
        self.info = meta_info.get(b'info')
        if not isinstance(self.info, dict):
            raise TorrentError("Missing 'info' dictionary")

        # 2. Text fields, decoded with the declared encoding if there is one
        self.encoding = self._text(meta_info.get(b'encoding', b''), 'utf-8')
        self.name = self._require_text(self.info, b'name')
        self.comment = self._text(meta_info.get(b'comment', b''))
        self.created_by = self._text(meta_info.get(b'created by', b''))
        self.creation_date = self._parse_creation_date()

        # 3. Tracker
        self.announce = self._text(meta_info.get(b'announce', b''))

        # 4. Pieces
        self.piece_length = self._require(self.info, b'piece length', int)
        self.pieces = self._require(self.info, b'pieces', bytes)
        self._check_pieces()

        # 5. Files (Single vs Multi-file)
        self.files = self._parse_files()

        logger.debug(f"Loaded Torrent: {self.name}")
        logger.debug(f"Size: {format_bytes(self.total_size)} in {len(self.files)} file(s)")
        logger.debug(f"Pieces: {len(self.pieces) // PIECE_HASH_SIZE} (Length: {self.piece_length})")

    @classmethod
    def from_bytes(cls, data: bytes):
        return cls(Decoder(data).decode())

    @property
    def total_size(self) -> int:
        return sum(f.length for f in self.files)

    @property
    def info_hash(self) -> bytes:
        """SHA-1 of the bencoded info dictionary, the torrent's unique ID."""
        return sha1_hash(Encoder.encode(self.info))

    def _text(self, raw, encoding=None):
        if not isinstance(raw, bytes):
            raise TorrentError(f"Expected a string, got {type(raw).__name__}")
        encoding = encoding or self.encoding or 'utf-8'
        try:
            return raw.decode(encoding, errors='replace')
        except LookupError:
            # Unknown names and bytes-to-bytes codecs such as 'hex'
            return raw.decode('utf-8', errors='replace')

    def _require(self, container, key, kind):
        if key not in container:
            raise TorrentError(f"Missing '{key.decode()}' field")
        value = container[key]
        if not isinstance(value, kind):
            raise TorrentError(f"Field '{key.decode()}' has the wrong type")
        return value

    def _require_text(self, container, key):
        return self._text(self._require(container, key, bytes))

    def _parse_creation_date(self):
        timestamp = self.meta_info.get(b'creation date')
        if not isinstance(timestamp, int):
            return None
        try:
            return datetime.fromtimestamp(timestamp, timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError):
            logger.warning(f"Ignoring out of range creation date {timestamp}")
            return None

    def _parse_files(self):
        files = []
        if b'files' in self.info:
            # Multi-file mode
            for f in self._require(self.info, b'files', list):
                if not isinstance(f, dict):
                    raise TorrentError("File entries must be dictionaries")
                parts = self._require(f, b'path', list)
                path = '/'.join([self._text(p) for p in parts])
                files.append(TorrentFile(path, self._require(f, b'length', int)))
        elif b'length' in self.info:
            # Single-file mode
            files.append(TorrentFile(self.name, self._require(self.info, b'length', int)))
        else:
            raise TorrentError("Info dictionary has neither 'length' nor 'files'")
        return files

    def _check_pieces(self):
        """The 'pieces' string is a concatenation of 20-byte SHA1 hashes."""
        if len(self.pieces) % PIECE_HASH_SIZE != 0:
            raise TorrentError("Invalid piece hash length")
