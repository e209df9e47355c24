from collections import OrderedDict

import pytest

from torrentinfo.bencoding import encode
from torrentinfo.render import Mode, SummaryView, TreeRenderer
from torrentinfo.torrent import Torrent
from torrentinfo.ui import TextStyler


def row(label, value):
    return ("    " + label).ljust(19) + value


class TestTreeRenderer:

    def test_dictionary_keys_are_sorted(self, plain):
        value = OrderedDict([(b"zeta", 1), (b"alpha", 2)])
        assert TreeRenderer(plain).render(value) == [
            "    alpha",
            "        2",
            "    zeta",
            "        1",
        ]

    def test_keys_sort_by_byte_value(self, plain):
        value = OrderedDict([(b"b", 1), (b"B", 2), (b"a b", 3)])
        lines = TreeRenderer(plain).render(value)
        assert [line.strip() for line in lines[::2]] == ["B", "a b", "b"]

    def test_single_element_list_has_no_index(self, plain):
        value = {b"announce-list": [[b"http://tracker/announce"]]}
        assert TreeRenderer(plain).render(value) == [
            "    announce-list",
            "        http://tracker/announce",
        ]

    def test_longer_lists_are_indexed_in_order(self, plain):
        value = {b"list": [b"x", 5, [b"y", b"z"]]}
        assert TreeRenderer(plain).render(value) == [
            "    list",
            "        0",
            "            x",
            "        1",
            "            5",
            "        2",
            "            0",
            "                y",
            "            1",
            "                z",
        ]

    def test_pieces_are_summarised(self, plain):
        value = {b"info": {b"name": b"pieces", b"pieces": b"\x00\xff" * 20}}
        assert TreeRenderer(plain).render(value) == [
            "    info",
            "        name",
            "            pieces",
            "        pieces",
            "            [40 UTF-8 Bytes]",
        ]

    def test_nested_dict_inside_list(self, plain):
        value = {b"files": [{b"length": 1, b"path": [b"a"]}, {b"length": 2, b"path": [b"b"]}]}
        lines = TreeRenderer(plain).render(value)
        assert lines[:6] == [
            "    files",
            "        0",
            "            length",
            "                1",
            "            path",
            "                a",
        ]

    def test_key_colours_depend_on_depth(self):
        lines = TreeRenderer(TextStyler()).render({b"info": {b"name": b"n"}})
        assert lines[0].startswith("    \x1b[")
        assert "33" in lines[0]
        assert lines[1] == "        \x1b[32mname\x1b[0m"
        assert lines[2] == "            n"

    def test_integers_are_cyan(self):
        assert TreeRenderer(TextStyler()).render({b"k": 7})[1] == "        \x1b[36m7\x1b[0m"

    def test_pieces_summary_is_bright_red(self):
        line = TreeRenderer(TextStyler()).render({b"pieces": b"1234"})[1]
        assert "[4 UTF-8 Bytes]" in line
        assert line.startswith("        \x1b[") and "31" in line

    def test_unknown_types_are_rejected(self, plain):
        with pytest.raises(TypeError):
            TreeRenderer(plain).render({b"k": 1.5})

    def test_render_starts_fresh_each_time(self, plain):
        renderer = TreeRenderer(plain)
        renderer.render({b"a": 1})
        assert renderer.render({b"b": 2}) == ["    b", "        2"]


class TestSummaryView:

    def test_compact(self, torrent_bytes, plain):
        torrent = Torrent.from_bytes(torrent_bytes)
        lines = SummaryView(plain).render(torrent, title="sample.torrent")
        assert lines == [
            "sample.torrent",
            row("name", "sample"),
            row("comment", "two small files"),
            row("announce url", "http://tracker.example.com:6969/announce"),
            row("created by", "mktorrent 1.1"),
            row("created on", str(torrent.creation_date)),
            row("num files", "2"),
            row("total size", "2.49 KB"),
            row("Info Hash", torrent.info_hash.hex()),
        ]

    def test_compact_shows_encoding_when_present(self, meta_info, plain):
        meta_info["encoding"] = "UTF-8"
        lines = SummaryView(plain).render(Torrent.from_bytes(encode(meta_info)))
        assert row("encoding", "UTF-8") in lines
        assert lines.index(row("encoding", "UTF-8")) == lines.index(row("num files", "2")) - 1

    def test_compact_without_creation_date(self, meta_info, plain):
        del meta_info["creation date"]
        lines = SummaryView(plain).render(Torrent.from_bytes(encode(meta_info)))
        assert row("created on", "") in lines

    def test_files_only(self, torrent_bytes, plain):
        lines = SummaryView(plain).render(Torrent.from_bytes(torrent_bytes), Mode.FILES)
        assert lines == [
            "    files",
            "        0",
            "            path",
            "                a.txt",
            "            length",
            "                500 B",
            "        1",
            "            path",
            "                b.bin",
            "            length",
            "                2.00 KB",
        ]

    def test_detailed(self, torrent_bytes, plain):
        lines = SummaryView(plain).render(Torrent.from_bytes(torrent_bytes), Mode.DETAILED)
        assert "                500 B" in lines
        assert "                2.00 KB" in lines
        assert lines[-4:] == [
            "    piece length",
            "            16.00 KB",
            "    pieces",
            "            [40 UTF-8 Bytes]",
        ]
        assert row("name", "sample") not in lines

    def test_styled_labels(self, torrent_bytes):
        lines = SummaryView(TextStyler()).render(Torrent.from_bytes(torrent_bytes), title="t")
        assert lines[0] == "\x1b[1mt\x1b[0m"
        assert lines[1].startswith("    \x1b[")
        assert lines[1].endswith("\x1b[0m" + " " * 11 + "sample")

