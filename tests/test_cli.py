import pytest

from fano.cli import DEFAULT_DECODED_NAME, DEFAULT_ENCODED_NAME, main


def test_encode_then_decode_files(tmp_path):
    source = tmp_path / "input.txt"
    encoded = tmp_path / "out.fano"
    decoded = tmp_path / "back.txt"
    source.write_bytes(b"AAAABBBCCD\n")

    assert main(["encode", str(source), str(encoded)]) == 0
    assert encoded.read_bytes().startswith(b"5")
    assert main(["decode", str(encoded), str(decoded)]) == 0
    assert decoded.read_bytes() == b"AAAABBBCCD\n"


def test_default_output_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_bytes(b"hello world")

    assert main(["encode", "input.txt"]) == 0
    assert (tmp_path / DEFAULT_ENCODED_NAME).exists()
    assert main(["decode", DEFAULT_ENCODED_NAME]) == 0
    assert (tmp_path / DEFAULT_DECODED_NAME).read_bytes() == b"hello world"


def test_encode_display_flags(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_bytes(b"AAAABBBCCD")

    assert main(["encode", str(source), str(tmp_path / "enc"), "-c", "-t", "-s"]) == 0
    out = capsys.readouterr().out
    assert "'A'\t0.400000\t0" in out
    assert "0000101010110110111" in out
    assert "Leaf: 'D'" in out
    assert "average_length: 1.9" in out


def test_decode_display_text(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_bytes(b"abracadabra")
    main(["encode", str(source), str(tmp_path / "enc")])
    capsys.readouterr()

    assert main(["decode", str(tmp_path / "enc"), str(tmp_path / "dec"), "-c"]) == 0
    assert "abracadabra" in capsys.readouterr().out


def test_empty_input(tmp_path, capsys):
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")

    assert main(["encode", str(source), str(tmp_path / "enc")]) == 0
    assert "пуст" in capsys.readouterr().out
    assert main(["decode", str(tmp_path / "enc"), str(tmp_path / "dec")]) == 0
    assert (tmp_path / "dec").read_bytes() == b""


def test_missing_input_reports_error(tmp_path):
    assert main(["encode", str(tmp_path / "missing.txt"), str(tmp_path / "enc")]) == 1


def test_corrupted_input_reports_error(tmp_path):
    broken = tmp_path / "broken.txt"
    broken.write_bytes(b"2\nA\t0.500000\t0\nB\t0.500000\t1\n\n0101x")
    assert main(["decode", str(broken), str(tmp_path / "dec")]) == 1


@pytest.mark.parametrize("argv", [["encode"], ["bogus"], ["encode", "a", "b", "c"], ["decode", "--nope", "x"]])
def test_malformed_invocation_exits_cleanly(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 0
    assert "usage" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "encode" in capsys.readouterr().out
