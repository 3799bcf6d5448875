import pytest

from heatmapper.datafile import parse_grid, read_grid


def _grid_text(xmax, ymax, height):
    lines = [f"0, {xmax}, 1", f"0, {ymax}, 1"]
    for x in range(xmax + 1):
        for y in range(ymax + 1):
            lines.append(f"{x}, {y}, {height(x, y)}")
    return "\n".join(lines) + "\n"


def test_axis_lengths():
    grid = parse_grid(_grid_text(2, 1, lambda x, y: 0))
    assert grid.xlength == 3
    assert grid.ylength == 2
    assert len(grid.samples) == grid.xlength * grid.ylength


def test_header_values():
    grid = parse_grid(_grid_text(2, 1, lambda x, y: 0))
    assert (grid.xmin, grid.xmax, grid.xstep) == (0.0, 2.0, 1.0)
    assert (grid.ymin, grid.ymax, grid.ystep) == (0.0, 1.0, 1.0)


def test_at_follows_file_layout():
    grid = parse_grid(_grid_text(3, 2, lambda x, y: 10 * x + y))
    for x in range(4):
        for y in range(3):
            assert grid.at(x, y) == 10 * x + y


def test_samples_kept_in_file_order():
    grid = parse_grid(_grid_text(1, 1, lambda x, y: 10 * x + y))
    assert grid.samples == (0.0, 1.0, 10.0, 11.0)


def test_whitespace_variations_are_accepted():
    text = "0,1,1\n0,  0, 1\n0 ,0, 2.5\n1, 0,-1.5\n"
    grid = parse_grid(text)
    assert grid.samples == (2.5, -1.5)


def test_extra_samples_are_ignored():
    text = _grid_text(1, 1, lambda x, y: x + y) + "9, 9, 99\n"
    assert len(parse_grid(text).samples) == 4


def test_at_out_of_range():
    grid = parse_grid(_grid_text(1, 1, lambda x, y: 0))
    with pytest.raises(IndexError):
        grid.at(2, 0)
    with pytest.raises(IndexError):
        grid.at(0, -1)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0, 1, 1\n",
        "0, 1, 1\n0, 1, 1\n0, 0, 1\n",
        "0, 1, 0\n0, 1, 1\n",
        "0, 1, 1\n0, 1, 1\n0, 0, abc\n",
    ],
)
def test_malformed_files(text):
    with pytest.raises(ValueError):
        parse_grid(text)


def test_read_grid_matches_parse(tmp_path):
    text = _grid_text(2, 2, lambda x, y: x * y)
    path = tmp_path / "data.csv"
    path.write_text(text)
    assert read_grid(path) == parse_grid(text)


def test_read_grid_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_grid(tmp_path / "missing.csv")