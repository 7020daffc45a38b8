"""
Test Wind Directions Grid CLI
=============================

Runs the `plan` and `render` subcommands in-process.

Usage:
    pytest test_grid_cli.py
"""

import json

import cv2
import pytest

from winddirections_cli.cli import create_parser, get_target_run_folder, main


def test_plan_prints_json(capsys):
    main([
        "plan", "--width", "200", "--height", "200",
        "--circles", "2", "--label-text-size", "10",
    ])

    plan = json.loads(capsys.readouterr().out)
    primitives = plan["primitives"]

    assert plan["extent"] == {"width": 200.0, "height": 200.0}
    assert [p["type"] for p in primitives] == ["circle"] * 3 + ["line"] * 2 + ["label"] * 4
    assert [p["radius"] for p in primitives[:3]] == pytest.approx([90.0, 45.0, 0.0])
    assert primitives[3]["start"] == pytest.approx([10.0, 100.0])
    assert primitives[5]["text"] == "N"
    assert primitives[5]["position"] == pytest.approx([100 - 10 / 3, 10.0])


def test_plan_degenerate_surface(capsys):
    main(["plan", "--width", "0", "--height", "100"])

    plan = json.loads(capsys.readouterr().out)
    assert plan["primitives"] == []


def test_plan_from_yaml_with_overrides(tmp_path, capsys):
    config_path = tmp_path / "grid.yaml"
    config_path.write_text("circles_number: 5\ntext_color: '#ff0000'\ngrid_size: 3\n")

    main([
        "plan", "--width", "100", "--height", "100",
        "--config", str(config_path), "--grid-line-width", "2",
    ])

    plan = json.loads(capsys.readouterr().out)
    circles = [p for p in plan["primitives"] if p["type"] == "circle"]
    labels = [p for p in plan["primitives"] if p["type"] == "label"]

    assert len(circles) == 6
    assert {label["color"] for label in labels} == {"#ff0000"}
    assert plan["grid_style"]["width"] == 2.0


def test_render_writes_image(tmp_path, capsys):
    output = tmp_path / "out" / "grid.png"

    main([
        "render", "--width", "120", "--height", "80",
        "--grid-color", "#ff0000", "--label-text-size", "10",
        "--output", str(output),
    ])

    assert capsys.readouterr().out.strip() == str(output)
    image = cv2.imread(str(output))
    assert image.shape == (80, 120, 3)
    assert image[40, 60].tolist() == [0, 0, 255]


def test_render_degenerate_surface_writes_nothing(tmp_path):
    output = tmp_path / "grid.png"

    main(["render", "--width", "0", "--height", "0", "--output", str(output)])

    assert not output.exists()


@pytest.mark.parametrize("width", ["nan", "inf", "-inf"])
def test_render_non_finite_width_writes_nothing(width, tmp_path, capsys):
    output = tmp_path / "grid.png"

    main(["render", "--width", width, "--height", "100", "--output", str(output)])

    assert not output.exists()
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["plan", "--width", "10", "--height", "10", "--circles", "0"],
        ["plan", "--width", "10", "--height", "10", "--grid-color", "blue-ish"],
        ["plan", "--width", "10", "--height", "10", "--config", "/nonexistent/grid.yaml"],
        ["render", "--width", "10", "--height", "10", "--background", "#12"],
    ],
)
def test_invalid_input_exits_with_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1


def test_parser_defaults():
    args = create_parser().parse_args(["render", "--width", "10", "--height", "20"])

    assert args.background == "#ffffff"
    assert args.output is None
    assert args.circles is None
    assert args.log_level == "WARNING"


def test_get_target_run_folder(tmp_path):
    folder = get_target_run_folder("grid", root=str(tmp_path))

    assert folder.is_dir()
    assert folder.parent == tmp_path / "grid"


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
