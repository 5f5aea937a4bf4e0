import json

from builders import ebml_header, element, master, string, uint
from ebmltree.__main__ import main
from ebmltree.ebml import ids


def test_dump_tree(tmp_path, capsys, minimal_bytes):
    path = tmp_path / "minimal.webm"
    path.write_bytes(minimal_bytes)

    assert main([str(path)]) == 0
    output = capsys.readouterr().out
    assert output.startswith("0x1A45DFA3 EBML size=")
    assert "0x18538067 Segment size=" in output


def test_summary(tmp_path, capsys, minimal_bytes):
    path = tmp_path / "minimal.webm"
    path.write_bytes(minimal_bytes)

    assert main([str(path), "--summary"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["doc_type"] == "webm"
    assert summary["tracks"] == []


def test_bad_file_fails(tmp_path, capsys):
    path = tmp_path / "not-ebml.bin"
    path.write_bytes(b"RIFF\x00\x00\x00\x00")

    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_dump_tree_with_undecodable_string(tmp_path, capsys):
    info = master(
        ids.INFO,
        uint(ids.TIMESTAMP_SCALE, 1_000_000),
        element(ids.MUXING_APP, b"\xff\xfe"),
        string(ids.WRITING_APP, "test"),
    )
    path = tmp_path / "bad-string.webm"
    path.write_bytes(ebml_header() + master(ids.SEGMENT, info))

    assert main([str(path)]) == 0
    assert "MuxingApp size=2 value=ff fe (invalid utf-8)" in capsys.readouterr().out


def test_summary_failure_is_not_a_parse_failure(tmp_path, caplog):
    path = tmp_path / "no-codec.webm"
    entry = master(ids.TRACK_ENTRY, uint(ids.TRACK_NUMBER, 1))
    path.write_bytes(ebml_header() + master(ids.SEGMENT, master(ids.TRACKS, entry)))

    assert main([str(path), "--summary"]) == 1
    assert "Failed to summarize" in caplog.text
    assert "Failed to parse" not in caplog.text
