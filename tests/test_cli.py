import json

from typer.testing import CliRunner

from lottiekit.cli import app

runner = CliRunner()


def test_presets_lists_catalog():
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "bounce-in" in result.stdout
    assert "slide-in-right" in result.stdout


def test_demo_exports_valid_document(tmp_path):
    path = tmp_path / "demo.json"
    result = runner.invoke(app, ["demo", "fade-in", "--kind", "ellipse", "--output", str(path)])
    assert result.exit_code == 0
    document = json.loads(path.read_text(encoding="utf-8"))
    layer = document["layers"][0]
    assert layer["shapes"][0]["ty"] == "el"
    assert layer["ks"]["o"]["a"] == 1


def test_demo_unknown_preset():
    result = runner.invoke(app, ["demo", "explode"])
    assert result.exit_code != 0


def test_validate_reports_errors(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "v": "5.5.7", "fr": 30, "ip": 30, "op": 30, "w": 512, "h": 512, "nm": "x", "layers": [],
    }))
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1


def test_validate_accepts_good_file(tmp_path):
    path = tmp_path / "good.json"
    path.write_text(json.dumps({
        "v": "5.5.7", "fr": 30, "ip": 0, "op": 30, "w": 512, "h": 512, "nm": "x", "layers": [],
    }))
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 0
    assert "valid" in result.stdout
