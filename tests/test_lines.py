import io

from minisyn.lines import LineReader


class _Trickle:
    """A stream that hands out one byte per read."""

    def __init__(self, data):
        self._data = data
        self._pos = 0

    def read(self, size=-1):
        chunk = self._data[self._pos:self._pos + 1]
        self._pos += len(chunk)
        return chunk


def test_binary_lines_keep_newlines():
    reader = LineReader(io.BytesIO(b"a\nb\nc"))
    assert reader.next_line() == b"a\n"
    assert reader.next_line() == b"b\n"
    assert reader.next_line() == b"c"
    assert reader.next_line() is None


def test_text_lines():
    reader = LineReader(io.StringIO("first\nsecond\n"))
    assert list(reader) == ["first\n", "second\n"]


def test_empty_stream_gives_none():
    reader = LineReader(io.BytesIO(b""))
    assert reader.next_line() is None
    assert list(reader) == []


def test_lines_rejoin_to_original():
    data = "one\n\nthree\nfour"
    assert "".join(LineReader(io.StringIO(data))) == data


def test_empty_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"))) == ["\n", "\n"]


def test_small_reads_are_gathered():
    data = b"alpha\nbeta\n"
    lines = list(LineReader(_Trickle(data)))
    assert lines == data.splitlines(keepends=True)


def test_data_arriving_later_is_read():
    stream = io.StringIO()
    reader = LineReader(stream)
    stream.write("x\ny\n")
    stream.seek(0)
    assert reader.next_line() == "x\n"
    position = stream.tell()
    stream.write("z\n")
    stream.seek(position)
    assert reader.next_line() == "y\n"
    assert reader.next_line() == "z\n"
    assert reader.next_line() is None