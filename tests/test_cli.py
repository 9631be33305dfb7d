import json
from holescan.cli import main


def test_cli_detect_writes_outputs(tmp_path, png_bytes, capsys):
    img = tmp_path / "target.png"
    img.write_bytes(png_bytes)
    out_json = tmp_path / "res.json"
    out_csv = tmp_path / "res.csv"
    out_ov = tmp_path / "ov.png"
    rc = main(["detect", str(img), "--json", str(out_json), "--csv", str(out_csv),
               "--overlay", str(out_ov)])
    assert rc == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["count"] == 1
    assert json.loads(out_json.read_text(encoding="utf-8")) == printed
    assert out_csv.exists() and out_ov.exists()


def test_cli_threshold_option(tmp_path, png_bytes, capsys):
    img = tmp_path / "target.png"
    img.write_bytes(png_bytes)
    assert main(["detect", str(img), "--enforce-area", "--blur", "5"]) == 0
    assert json.loads(capsys.readouterr().out)["count"] == 1


def test_cli_missing_image(tmp_path):
    assert main(["detect", str(tmp_path / "nope.png")]) == 2


def test_cli_invalid_params(tmp_path, png_bytes):
    img = tmp_path / "target.png"
    img.write_bytes(png_bytes)
    assert main(["detect", str(img), "--blur", "4"]) == 2


def test_cli_log_options_after_subcommand(tmp_path, png_bytes, capsys):
    img = tmp_path / "target.png"
    img.write_bytes(png_bytes)
    log = tmp_path / "run.log"
    rc = main(["detect", str(img), "--log-level", "DEBUG", "--log-file", str(log)])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["count"] == 1
    assert "Detected 1 hole" in log.read_text(encoding="utf-8")


def test_cli_overlay_write_failure(tmp_path, png_bytes):
    img = tmp_path / "target.png"
    img.write_bytes(png_bytes)
    bad = tmp_path / "no_such_dir" / "ov.png"
    assert main(["detect", str(img), "--overlay", str(bad)]) == 1
    assert main(["detect", str(img), "--overlay", str(tmp_path / "ov.unknownext")]) == 1
