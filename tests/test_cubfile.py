import pytest

from cubray.cubfile import (
    CubFile,
    CubFileError,
    check_args,
    check_file_name,
    extract_map,
    is_element,
    is_valid_map_char,
    load_cub,
    parse_color,
    parse_elements,
    parse_int,
    read_lines,
)

MAP = [
    "1111111\n",
    "1000001\n",
    "1000001\n",
    "1000001\n",
    "100N001\n",
    "1000001\n",
    "1000001\n",
    "1000001\n",
    "1111111",
]


@pytest.fixture
def texture(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text("x")
    return str(path)


def elements(texture):
    return [
        f"NO {texture}\n",
        f"SO {texture}\n",
        f"WE {texture}\n",
        f"EA {texture}\n",
        "\n",
        "F 220,100,0\n",
        "C 225,30,0\n",
        "\n",
    ]


def write_scene(tmp_path, lines):
    path = tmp_path / "scene.cub"
    path.write_text("".join(lines))
    return path


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.cub", True),
        (".cub", True),
        ("maps/map.cub", True),
        ("map.cu", False),
        ("map.cubx", False),
        ("map", False),
        ("./maps/map.cub", False),
        ("a.b.cub", False),
        ("a.cub.cub", False),
    ],
)
def test_check_file_name(name, expected):
    assert check_file_name(name) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  7", 7),
        ("+5", 5),
        ("-3", -3),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("+", 0),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "5 ", "12a", "2147483648", "-2147483649"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_color_values():
    assert parse_color("255,0,128") == (255, 0, 128)
    assert parse_color("1,,2,3") == (1, 2, 3)


@pytest.mark.parametrize("text", ["256,0,0", "1,2", "1,2,3,4", "-1,0,0", "a,b,c", ""])
def test_parse_color_rejects(text):
    with pytest.raises(CubFileError) as excinfo:
        parse_color(text)
    assert str(excinfo.value) == "Wrong color code, must be : C 255,255,255"


def test_is_element():
    assert all(is_element(line) for line in ["NO x", "SO", "WE", "EA", "F 1", "C 2"])
    assert not is_element("1111")
    assert not is_element(" 1")
    assert not is_element("")


def test_is_valid_map_char():
    assert all(is_valid_map_char(c) for c in "NSWE10 \n")
    assert not is_valid_map_char("X")
    assert not is_valid_map_char("\t")
    assert not is_valid_map_char("2")


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "f.cub"
    path.write_text("a\nb\nc\nd\ne\nf")
    assert read_lines(path) == ["a\n", "b\n", "c\n", "d\n", "e\n", "f"]


def test_read_lines_too_short(tmp_path):
    path = tmp_path / "f.cub"
    path.write_text("a\nb\nc\nd\ne\n")
    with pytest.raises(CubFileError) as excinfo:
        read_lines(path)
    assert str(excinfo.value) == "File length"


def test_read_lines_too_long(tmp_path):
    path = tmp_path / "f.cub"
    path.write_text("1\n" * 1501)
    with pytest.raises(CubFileError):
        read_lines(path)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(CubFileError) as excinfo:
        read_lines(tmp_path / "absent.cub")
    assert str(excinfo.value) == "File access"


def test_parse_elements_valid(texture):
    cub = parse_elements(elements(texture) + MAP)
    assert cub.north == texture
    assert cub.east == texture
    assert cub.floor == (220, 100, 0)
    assert cub.ceiling == (225, 30, 0)
    assert cub.is_complete()


def test_empty_cubfile_is_incomplete():
    assert CubFile().is_complete() is False


def test_parse_elements_duplicate_texture(texture):
    lines = elements(texture) + [f"NO {texture}\n"] + MAP
    lines = [f"NO {texture}\n"] + lines
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "too many textures"


def test_parse_elements_duplicate_color(texture):
    lines = ["F 1,2,3\n"] + elements(texture) + MAP
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "Invalid characters"


def test_parse_elements_missing_element(texture):
    lines = [line for line in elements(texture) if not line.startswith("C")]
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "missing texture"


def test_parse_elements_stray_line_before_complete(texture):
    lines = elements(texture)
    lines.insert(1, "hello\n")
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "Texture"


def test_parse_elements_bad_texture_format(texture):
    lines = elements(texture)
    lines[0] = f"NO {texture} extra\n"
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "Texture format : NO /texture/file_name"


def test_parse_elements_unreadable_texture(texture, tmp_path):
    lines = elements(texture)
    lines[0] = f"NO {tmp_path / 'missing.xpm'}\n"
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "File can't be opened"


def test_parse_elements_bad_color_format(texture):
    lines = elements(texture)
    lines[5] = "F 1, 2,3\n"
    with pytest.raises(CubFileError) as excinfo:
        parse_elements(lines)
    assert str(excinfo.value) == "Texture format : C 255,255,255"


def test_extract_map_skips_blank_lines(texture):
    lines = elements(texture) + ["\n", "\n"] + MAP
    assert extract_map(lines) == MAP


def test_extract_map_too_small(texture):
    with pytest.raises(CubFileError) as excinfo:
        extract_map(elements(texture) + MAP[:8])
    assert str(excinfo.value) == "wrong map size (must be between 3 && 1500 lines)"


def test_extract_map_invalid_char(texture):
    rows = list(MAP)
    rows[2] = "10X0001\n"
    with pytest.raises(CubFileError):
        extract_map(elements(texture) + rows)


def test_extract_map_wrong_element_count(texture):
    lines = [line for line in elements(texture) if not line.startswith("F")] + MAP
    with pytest.raises(CubFileError) as excinfo:
        extract_map(lines)
    assert str(excinfo.value) == "Invalid characters"


def test_load_cub_round_trip(tmp_path, texture):
    path = write_scene(tmp_path, elements(texture) + MAP)
    cub = load_cub(path)
    assert cub.map == MAP
    assert cub.south == texture
    assert cub.west == texture
    assert cub.lines == elements(texture) + MAP
    assert (cub.orientation, cub.start_x, cub.start_y) == ("m", 1, 1)


def test_load_cub_rejects_bad_map(tmp_path, texture):
    rows = list(MAP)
    rows[4] = "1\t00001\n"
    path = write_scene(tmp_path, elements(texture) + rows)
    with pytest.raises(CubFileError):
        load_cub(path)


def test_check_args_accepts_single_cub():
    assert check_args(["map.cub"]) == "map.cub"


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(CubFileError) as excinfo:
        check_args(argv)
    assert str(excinfo.value) == "Wrong argument count"


def test_check_args_wrong_name():
    with pytest.raises(CubFileError) as excinfo:
        check_args(["map.txt"])
    assert str(excinfo.value) == "Wrong File Name / Format"