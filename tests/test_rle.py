import pytest

from unixtools.rle import compress, decompress, unzip_main, zip_main


def test_compress_wire_format():
    assert compress(b"aaab") == b"\x03\x00\x00\x00a\x01\x00\x00\x00b"


def test_compress_empty():
    assert compress(b"") == b""


@pytest.mark.parametrize(
    "data", [b"", b"a", b"aaaa", b"abcabc", b"\x00\x00\xff\n\n\n", bytes(range(256)) * 2]
)
def test_round_trip(data):
    assert decompress(compress(data)) == data


def test_record_length_is_five_per_run():
    assert len(compress(b"aabbcc")) == 3 * 5


def test_decompress_pinned():
    assert decompress(b"\x02\x00\x00\x00x") == b"xx"


def test_decompress_negative_count_yields_nothing():
    assert decompress(b"\xff\xff\xff\xffz") == b""


def test_decompress_truncated_raises():
    with pytest.raises(ValueError):
        decompress(b"\x02\x00\x00\x00")


def test_zip_main_concatenates_per_file(tmp_path, capsysbinary):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"aa")
    second.write_bytes(b"ab")
    assert zip_main([str(first), str(second)]) == 0
    assert capsysbinary.readouterr().out == compress(b"aa") + compress(b"ab")


def test_unzip_main_restores(tmp_path, capsysbinary):
    packed = tmp_path / "packed"
    packed.write_bytes(compress(b"hello world\n"))
    assert unzip_main([str(packed)]) == 0
    assert capsysbinary.readouterr().out == b"hello world\n"


def test_zip_main_no_arguments(capsys):
    assert zip_main([]) == 1
    assert capsys.readouterr().out == "my-unzip: file1 [file2 ...]\n"


def test_zip_main_missing_file(tmp_path, capsys):
    assert zip_main([str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().out == "my-zip: cannot open file\n"


def test_unzip_main_missing_file(tmp_path, capsys):
    assert unzip_main([str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().out == "my-unzip: cannot open file\n"