import numpy as np
import pytest
from PIL import Image

from greycheck.cli import Options, main, parse_args, run


def _write_input(path, seed=0):
    rng = np.random.default_rng(seed)
    Image.fromarray(rng.integers(0, 256, size=(6, 8, 3), dtype=np.uint8)).save(path)
    return path


def test_parse_single_argument_uses_defaults():
    options = parse_args(["in.png"])
    assert options == Options("in.png", "HW1_output.png", "HW1_reference.png")
    assert options.use_eps_check is False


def test_parse_output_and_reference():
    assert parse_args(["in.png", "out.png"]).output_file == "out.png"
    options = parse_args(["in.png", "out.png", "ref.png"])
    assert (options.output_file, options.reference_file) == ("out.png", "ref.png")
    assert options.reference_file == "ref.png"


def test_parse_tolerances_enable_eps_check():
    options = parse_args(["a", "b", "c", "2", "0.1"])
    assert options.use_eps_check is True
    assert options.per_pixel_error == 2.0
    assert options.global_error == 0.1


def test_parse_tolerances_read_numeric_prefix():
    options = parse_args(["a", "b", "c", "abc", "1.5x"])
    assert options.per_pixel_error == 0.0
    assert options.global_error == 1.5


@pytest.mark.parametrize("argv", [[], ["a", "b", "c", "d"], ["a", "b", "c", "d", "e", "f"]])
def test_parse_rejects_wrong_argument_count(argv):
    with pytest.raises(ValueError, match="Usage"):
        parse_args(argv)


def test_main_end_to_end(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    source = _write_input(tmp_path / "in.png")
    output = tmp_path / "out.png"
    reference = tmp_path / "ref.png"
    assert main([str(source), str(output), str(reference)]) == 0
    captured = capsys.readouterr()
    assert "Your code ran in:" in captured.out
    assert captured.out.rstrip().endswith("PASS")
    with Image.open(output) as out_image, Image.open(reference) as ref_image:
        assert np.array_equal(np.array(out_image), np.array(ref_image))
    assert (tmp_path / "HW1_differenceImage.png").exists()


def test_run_writes_difference_file(tmp_path, capsys):
    source = _write_input(tmp_path / "in.png", seed=4)
    options = Options(
        str(source),
        str(tmp_path / "o.png"),
        str(tmp_path / "r.png"),
        use_eps_check=True,
        per_pixel_error=1.0,
        global_error=0.0,
        difference_file=str(tmp_path / "d.png"),
    )
    run(options)
    assert "PASS" in capsys.readouterr().out
    with Image.open(tmp_path / "d.png") as image:
        assert (np.array(image) == 0).all()


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png"), str(tmp_path / "o.png")]) == 1
    assert "Couldn't open file" in capsys.readouterr().err