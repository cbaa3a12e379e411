from __future__ import annotations

import io

import pytest
from PIL import Image

from conftest import WHITE, png_bytes
from scrunch.app.cli import EXIT_EMPTY, EXIT_ERROR, EXIT_OK, main


def test_writes_processed_file_next_to_input(tmp_path, mixed_rows, capsys):
    source = tmp_path / "screen.png"
    source.write_bytes(png_bytes(mixed_rows))
    assert main([str(source), "-n", "2"]) == EXIT_OK
    out_path = tmp_path / "processed-screen.png"
    with Image.open(io.BytesIO(out_path.read_bytes())) as img:
        assert img.size == (6, 2)
    assert "4 removed" in capsys.readouterr().out


def test_explicit_output_path(tmp_path, mixed_rows):
    source = tmp_path / "screen.png"
    source.write_bytes(png_bytes(mixed_rows))
    target = tmp_path / "out.png"
    assert main([str(source), "-o", str(target), "--max-different-pixels", "2"]) == EXIT_OK
    assert target.exists()


def test_empty_result_writes_nothing(tmp_path, capsys):
    source = tmp_path / "blank.png"
    source.write_bytes(png_bytes([[WHITE] * 3] * 3))
    assert main([str(source)]) == EXIT_EMPTY
    assert not (tmp_path / "processed-blank.png").exists()
    assert "No content rows" in capsys.readouterr().err


def test_unreadable_image_reports_error(tmp_path, capsys):
    source = tmp_path / "broken.png"
    source.write_bytes(b"nope")
    assert main([str(source)]) == EXIT_ERROR
    assert "Cannot read image" in capsys.readouterr().err


def test_threshold_out_of_range_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "x.png"), "-n", "101"])
    assert excinfo.value.code == 2
