import pytest

from app.services.listing import build_list_options, clamp_limit, clamp_skip, parse_int


class TestParseInt:
    """Test suite for leading-integer parsing of query values."""

    @pytest.mark.parametrize(
        "value, expected",
        [("42", 42), (" 7", 7), ("-5", -5), ("+3", 3), ("12abc", 12), ("1.9", 1)],
    )
    def test_parses_leading_integer(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "-", ".5", "NaN"])
    def test_non_numeric(self, value):
        assert parse_int(value) is None


class TestClamping:
    """Test suite for limit and skip bounds."""

    @pytest.mark.parametrize("n", [-1000, -1, 0, 1, 20, 99, 100, 101, 10**9])
    def test_limit_in_range(self, n):
        assert 1 <= clamp_limit(str(n)) <= 100

    def test_limit_values(self):
        assert clamp_limit("0") == 1
        assert clamp_limit("50") == 50
        assert clamp_limit("500") == 100
        assert clamp_limit("many") == 20
        assert clamp_limit(None) == 20

    @pytest.mark.parametrize("n", [-1000, -1, 0, 1, 10**9])
    def test_skip_non_negative(self, n):
        assert clamp_skip(str(n)) >= 0

    def test_skip_values(self):
        assert clamp_skip("-5") == 0
        assert clamp_skip("40") == 40
        assert clamp_skip("later") == 0
        assert clamp_skip(None) == 0


class TestBuildListOptions:
    """Test suite for assembling provider list options."""

    def test_defaults(self):
        options = build_list_options()

        assert options.model_dump(exclude_none=True) == {"limit": 20, "skip": 0}

    def test_folder_wins_over_path(self):
        assert build_list_options(folder="/a", path="/b").path == "/a"
        assert build_list_options(folder="", path="/b").path == "/b"
        assert build_list_options(folder="", path="").path is None

    @pytest.mark.parametrize("file_type", ["all", "image", "non-image", "video"])
    def test_known_file_types(self, file_type):
        assert build_list_options(file_type=file_type).file_type == file_type

    @pytest.mark.parametrize("file_type", ["bogus", "IMAGE", "", None])
    def test_unknown_file_types_dropped(self, file_type):
        assert build_list_options(file_type=file_type).file_type is None
