from idea_roulette.common.state import Idea
from idea_roulette.ideas.constants import CATEGORY_LAYOUT, DEFAULT_HOW_TO, DEFAULT_SPICE
from idea_roulette.ideas.loader import ContentLoader, parse_sections
from idea_roulette.config import DATA_DIR

from conftest import LAYOUT


def test_parse_sections_strips_numbering():
    content = "#a\n1. X\n2. Y\n#b\nZ\n"
    assert parse_sections(content) == {"a": ["X", "Y"], "b": ["Z"]}


def test_parse_sections_normalizes_headers_and_skips_blank_lines():
    content = "ignored before header\n\n#  Easy / Short  \n\n   3. Plank   \n\n#HARD / LONG\n"
    assert parse_sections(content) == {
        "easy / short": ["Plank"],
        "hard / long": [],
    }


def test_parse_sections_drops_lines_under_bare_marker():
    assert parse_sections("#\nX\n#a\nY\n") == {"": [], "a": ["Y"]}


def test_parse_sections_repeated_header_appends():
    assert parse_sections("#a\nX\n#b\nY\n#A\nZ\n") == {"a": ["X", "Z"], "b": ["Y"]}


def test_parse_sections_keeps_non_numbering_digits():
    assert parse_sections("#a\n10 push-ups\n") == {"a": ["10 push-ups"]}


def test_load_all_builds_ideas(data_dir):
    tree = ContentLoader(str(data_dir), LAYOUT).load_all()

    assert list(tree) == ["workout", "food"]
    assert list(tree["workout"]) == ["gym", "cardio"]
    assert [i.title for i in tree["workout"]["gym"]] == [
        "Bench press pyramid",
        "Goblet squats",
        "Farmer's carry",
    ]

    idea = tree["food"]["home"][0]
    assert idea == Idea("One-pot pasta", "One-pot pasta", DEFAULT_HOW_TO, DEFAULT_SPICE)


def test_missing_section_gives_empty_list(data_dir):
    tree = ContentLoader(str(data_dir), LAYOUT).load_all()
    assert tree["food"]["ordered"] == []


def test_missing_file_gives_empty_category(tmp_path):
    (tmp_path / "workouts.txt").write_text("#gym\nSquats\n", encoding="utf-8")

    tree = ContentLoader(str(tmp_path), LAYOUT).load_all()

    assert tree["workout"]["gym"][0].title == "Squats"
    assert tree["food"] == {"home": [], "ordered": []}


def test_undecodable_file_gives_empty_parse(tmp_path):
    (tmp_path / "workouts.txt").write_bytes(b"#gym\n\xff\xfe broken\n")

    loader = ContentLoader(str(tmp_path), LAYOUT)

    assert loader.load_file("workouts.txt") == {}


def test_load_file_is_memoized(data_dir):
    loader = ContentLoader(str(data_dir), LAYOUT)

    first = loader.load_file("workouts.txt")
    (data_dir / "workouts.txt").unlink()
    second = loader.load_file("workouts.txt")

    assert second is first
    assert loader.load_all()["workout"]["cardio"][0].title == "Hill repeats"


def test_failed_read_is_not_cached(tmp_path):
    loader = ContentLoader(str(tmp_path), LAYOUT)
    assert loader.load_file("food.txt") == {}

    (tmp_path / "food.txt").write_text("#ordered food\nRamen\n", encoding="utf-8")

    assert loader.load_file("food.txt") == {"ordered food": ["Ramen"]}


def test_bundled_data_fills_every_subcategory():
    tree = ContentLoader(DATA_DIR).load_all()

    assert list(tree) == list(CATEGORY_LAYOUT)
    for category, subs in tree.items():
        assert list(subs) == list(CATEGORY_LAYOUT[category]["subcategories"])
        for ideas in subs.values():
            assert ideas
