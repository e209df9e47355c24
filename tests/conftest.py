import pytest

from torrentinfo.bencoding import Encoder
from torrentinfo.ui import TextStyler


@pytest.fixture
def meta_info():
    return {
        "announce": "http://tracker.example.com:6969/announce",
        "comment": "two small files",
        "created by": "mktorrent 1.1",
        "creation date": 1500000000,
        "info": {
            "name": "sample",
            "piece length": 16384,
            "pieces": b"\xab" * 40,
            "files": [
                {"path": ["a.txt"], "length": 500},
                {"path": ["b.bin"], "length": 2048},
            ],
        },
    }


@pytest.fixture
def torrent_bytes(meta_info):
    return Encoder.encode(meta_info)


@pytest.fixture
def torrent_path(tmp_path, torrent_bytes):
    path = tmp_path / "sample.torrent"
    path.write_bytes(torrent_bytes)
    return path


@pytest.fixture
def plain():
    return TextStyler(enabled=False)
