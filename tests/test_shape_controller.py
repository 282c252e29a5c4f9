import io

import pytest

from labworks.shape_controller import (
    CIRCLE_INPUT_FORMAT,
    ShapeController,
    is_valid_color,
    main,
    parse_color,
)
from labworks.shapes import Circle, LineSegment


def make_controller(text):
    output = io.StringIO()
    return ShapeController(io.StringIO(text), output), output


@pytest.mark.parametrize(
    "command, params, message",
    [
        ("circle", "0 0.1 -3 ffffff aaaaaa", "Radius should be greater than 0"),
        ("triangle", "1 1 2 2 3 3 ffffff aaaaaa", "Coordinates of degenerate triangle"),
        ("rectangle", "5 5 1 1 ffffff aaaaaa", "Left top vertex should be more left"),
        ("rectangle", "1 5 5 1 www222 123456", "Invalid color format"),
    ],
)
def test_invalid_shapes(command, params, message):
    controller, _ = make_controller(params + "\n")
    with pytest.raises(ValueError, match=message):
        controller.handle_user_input(command)
    assert controller.shapes == []


def test_missing_parameters():
    controller, _ = make_controller("")
    with pytest.raises(ValueError, match="Invalid input format"):
        controller.handle_user_input("circle")


def test_non_numeric_parameter():
    controller, _ = make_controller("0 abc 1 ffffff aaaaaa\n")
    with pytest.raises(ValueError, match="Invalid input format"):
        controller.handle_user_input("circle")


def test_unknown_command():
    controller, _ = make_controller("")
    with pytest.raises(ValueError, match="Unknown command"):
        controller.handle_user_input("square")


def test_empty_line_does_nothing():
    controller, output = make_controller("")
    controller.handle_user_input("")
    assert controller.shape_with_max_area() is None
    assert output.getvalue() == ""


def test_add_circle_writes_prompt_and_stores_shape():
    controller, output = make_controller("0 0 2 ffffff aaaaaa\n")
    controller.handle_user_input("circle")
    assert output.getvalue() == CIRCLE_INPUT_FORMAT
    assert len(controller.shapes) == 1
    circle = controller.shapes[0]
    assert isinstance(circle, Circle)
    assert circle.radius == 2
    assert circle.fill_color == 0xFFFFFF
    assert circle.outline_color == 0xAAAAAA


def test_parameters_may_span_lines():
    controller, _ = make_controller("0 0\n3 4\nffffff\n")
    controller.handle_user_input("line")
    assert isinstance(controller.shapes[0], LineSegment)
    assert controller.shapes[0].perimeter == 5.0


def test_max_area_and_min_perimeter():
    controller, _ = make_controller(
        "0 0 1 ffffff aaaaaa\n0 0 3 4 ffffff\n0 4 3 0 aaaaaa ffffff\n"
    )
    controller.handle_user_input("circle")
    controller.handle_user_input("line")
    controller.handle_user_input("rectangle")
    circle, line, rectangle = controller.shapes
    assert controller.shape_with_max_area() is rectangle
    assert controller.shape_with_min_perimeter() is line
    assert all(controller.shape_with_max_area().area >= s.area for s in controller.shapes)


def test_print_two_shapes_without_shapes():
    controller, output = make_controller("")
    controller.print_two_shapes()
    assert output.getvalue() == "No shapes\n"


def test_print_two_shapes():
    controller, output = make_controller("0 0 1 ffffff aaaaaa\n")
    controller.handle_user_input("circle")
    output.seek(0)
    output.truncate()
    controller.print_two_shapes()
    circle_text = str(controller.shapes[0])
    assert output.getvalue() == (
        "Shape with max area: \n" + circle_text + "Shape with min perimeter: \n" + circle_text
    )


def test_colors():
    assert is_valid_color("aaaaaa")
    assert is_valid_color("12AbCd")
    assert not is_valid_color("www222")
    assert not is_valid_color("fffffff")
    assert parse_color("aaaaaa") == 0xAAAAAA
    with pytest.raises(ValueError, match="Invalid color format"):
        parse_color("12345")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("circle\n0 0 1 ffffff aaaaaa\nline\n0 0 3 4 ffffff\nsquare\n"),
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Unknown command\n" in out
    assert "Shape with max area: \nCircle\n" in out
    assert "Shape with min perimeter: \nLine segment\n" in out