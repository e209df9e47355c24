from enum import Enum

from torrentinfo.ui import Tag, LABEL, ALERT
from torrentinfo.utils import format_bytes

INDENT = " " * 4
LABEL_WIDTH = 19

BRIGHT = frozenset({Tag.BRIGHT})
CYAN = frozenset({Tag.CYAN})
GREEN = frozenset({Tag.GREEN})
MAGENTA = frozenset({Tag.MAGENTA})


def byte_summary(data: bytes) -> str:
    return f"[{len(data)} UTF-8 Bytes]"


class TreeRenderer:
    """
    Dumps a decoded bencode value as indented text.

    Dictionary keys are printed in byte order, whatever order the
    decoder produced them in. The 'pieces' blob is summarised instead
    of being printed as text.
    """

    def __init__(self, styler):
        self.styler = styler
        self.lines = []

    def render(self, value, depth=1):
        self.lines = []
        self._render(value, depth, None)
        return self.lines

    def _emit(self, depth, text):
        self.lines.append(INDENT * depth + text)

    def _render(self, value, depth, parent_key):
        if isinstance(value, dict):
            self._render_dict(value, depth)
        elif isinstance(value, list):
            self._render_list(value, depth)
        elif isinstance(value, int):
            self._emit(depth, self.styler.style(str(value), CYAN))
        elif isinstance(value, bytes):
            self._render_bytes(value, depth, parent_key)
        else:
            raise TypeError(f"Cannot render type: {type(value)}")

    def _render_dict(self, value, depth):
        key_tags = LABEL if depth < 2 else GREEN
        for key in sorted(value):
            name = key.decode('utf-8', errors='replace')
            self._emit(depth, self.styler.style(name, key_tags))
            self._render(value[key], depth + 1, name)

    def _render_list(self, value, depth):
        # Only single-element lists collapse, e.g. one-tracker announce tiers
        if len(value) == 1:
            self._render(value[0], depth, None)
            return

        for index, item in enumerate(value):
            self._emit(depth, self.styler.style(str(index), LABEL))
            self._render(item, depth + 1, None)

    def _render_bytes(self, value, depth, parent_key):
        if parent_key == "pieces":
            self._emit(depth, self.styler.style(byte_summary(value), ALERT))
        else:
            self._emit(depth, value.decode('utf-8', errors='replace'))


class Mode(Enum):
    COMPACT = "compact"
    DETAILED = "detailed"
    FILES = "files"


class SummaryView:
    """Renders a Torrent as a labelled summary, a file listing or both with piece stats."""

    def __init__(self, styler):
        self.styler = styler
        self.lines = []

    def render(self, torrent, mode=Mode.COMPACT, title=None):
        self.lines = []
        if title is not None:
            self.lines.append(self.styler.style(title, BRIGHT))

        if mode == Mode.COMPACT:
            self._render_compact(torrent)
        else:
            self._render_files(torrent)
        if mode == Mode.DETAILED:
            self._render_pieces(torrent)
        return self.lines

    def _label(self, depth, text):
        self.lines.append(INDENT * depth + self.styler.style(text, LABEL))

    def _row(self, label, value):
        padding = " " * max(LABEL_WIDTH - len(INDENT + label), 1)
        self.lines.append(INDENT + self.styler.style(label, LABEL) + padding + value)

    def _render_compact(self, torrent):
        created_on = str(torrent.creation_date) if torrent.creation_date else ""

        self._row("name", torrent.name)
        self._row("comment", torrent.comment)
        self._row("announce url", torrent.announce)
        self._row("created by", torrent.created_by)
        self._row("created on", self.styler.style(created_on, MAGENTA))
        if torrent.encoding:
            self._row("encoding", torrent.encoding)
        self._row("num files", str(len(torrent.files)))
        self._row("total size", self.styler.style(format_bytes(torrent.total_size), CYAN))
        self._row("Info Hash", torrent.info_hash.hex())

    def _render_files(self, torrent):
        self._label(1, "files")
        for index, f in enumerate(torrent.files):
            self._label(2, str(index))
            self._label(3, "path")
            self.lines.append(INDENT * 4 + f.path)
            self._label(3, "length")
            self.lines.append(INDENT * 4 + self.styler.style(format_bytes(f.length), CYAN))

    def _render_pieces(self, torrent):
        # Raw byte count of the blob, not the number of hashes in it
        self._label(1, "piece length")
        self.lines.append(INDENT * 3 + self.styler.style(format_bytes(torrent.piece_length), CYAN))
        self._label(1, "pieces")
        self.lines.append(INDENT * 3 + self.styler.style(byte_summary(torrent.pieces), ALERT))
