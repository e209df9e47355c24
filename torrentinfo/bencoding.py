from collections import OrderedDict


class BencodeError(ValueError):
    """Raised when data is not valid bencode."""


class Decoder:
    """
    Decodes Bencoded data (d, l, i, s) used in torrent files.
    Uses a recursive descent parser.

    Strings stay as raw bytes and dictionary keys are kept as bytes too,
    in the order they appear in the data.
    """
    def __init__(self, data: bytes):
        self._data = data
        self._index = 0

    def decode(self):
        """Decodes the whole buffer, rejecting trailing data."""
        value = self._decode_next()
        if self._index != len(self._data):
            raise BencodeError(f"Trailing data at index {self._index}")
        return value

    def _peek(self) -> bytes:
        if self._index >= len(self._data):
            raise BencodeError("Unexpected end of data")
        return self._data[self._index:self._index + 1]

    def _decode_next(self):
        token = self._peek()

        if token == b'i':
            return self._decode_int()
        elif token == b'l':
            return self._decode_list()
        elif token == b'd':
            return self._decode_dict()
        elif token.isdigit():
            return self._decode_string()
        else:
            raise BencodeError(f"Invalid bencoding at index {self._index}")

    def _decode_int(self):
        self._index += 1  # Skip 'i'
        end = self._data.find(b'e', self._index)
        if end == -1:
            raise BencodeError("Invalid integer format")

        try:
            number = int(self._data[self._index:end])
        except ValueError:
            raise BencodeError(f"Invalid integer at index {self._index}") from None
        self._index = end + 1  # Skip 'e'
        return number

    def _decode_string(self):
        colon = self._data.find(b':', self._index)
        if colon == -1:
            raise BencodeError("Invalid string format")

        try:
            length = int(self._data[self._index:colon])
        except ValueError:
            raise BencodeError(f"Invalid string length at index {self._index}") from None
        self._index = colon + 1

        if self._index + length > len(self._data):
            raise BencodeError("String runs past end of data")
        s = self._data[self._index:self._index + length]
        self._index += length
        return s

    def _decode_list(self):
        self._index += 1  # Skip 'l'
        lst = []
        while self._peek() != b'e':
            lst.append(self._decode_next())
        self._index += 1  # Skip 'e'
        return lst

    def _decode_dict(self):
        self._index += 1  # Skip 'd'
        d = OrderedDict()
        while self._peek() != b'e':
            key = self._decode_next()
            if not isinstance(key, bytes):
                # Keys in bencoded dicts must be strings (bytes)
                raise BencodeError("Dict keys must be strings")
            d[key] = self._decode_next()
        self._index += 1  # Skip 'e'
        return d


class Encoder:
    """Encodes Python objects back into Bencoded bytes."""
    @staticmethod
    def encode(data):
        if isinstance(data, str):
            return Encoder.encode(data.encode('utf-8'))
        elif isinstance(data, int):
            return f"i{data}e".encode()
        elif isinstance(data, bytes):
            return f"{len(data)}:".encode() + data
        elif isinstance(data, list):
            return b"l" + b"".join([Encoder.encode(item) for item in data]) + b"e"
        elif isinstance(data, dict):
            encoded = b"d"
            # Bencoding requires dict keys to be sorted lexicographically
            items = [(k.encode('utf-8') if isinstance(k, str) else k, v) for k, v in data.items()]
            for k, v in sorted(items):
                encoded += Encoder.encode(k) + Encoder.encode(v)
            encoded += b"e"
            return encoded
        else:
            raise TypeError(f"Cannot encode type: {type(data)}")


def decode(data: bytes):
    return Decoder(data).decode()


def encode(data) -> bytes:
    return Encoder.encode(data)
