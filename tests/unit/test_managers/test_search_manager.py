"""Tests for SearchManager and the character filter."""

from fakes.fake_catalog_port import make_character


def test_filter_characters_empty_term_returns_all(dragon_ball_characters):
    from charbrowser.managers.search_manager import filter_characters

    assert filter_characters(dragon_ball_characters, "") == dragon_ball_characters
    assert filter_characters(dragon_ball_characters, None) == dragon_ball_characters
    assert filter_characters(dragon_ball_characters, "  ") == dragon_ball_characters


def test_filter_characters_returns_new_list(dragon_ball_characters):
    from charbrowser.managers.search_manager import filter_characters

    result = filter_characters(dragon_ball_characters, "")

    assert result is not dragon_ball_characters


def test_filter_characters_name_prefix(dragon_ball_characters):
    from charbrowser.managers.search_manager import filter_characters

    result = filter_characters(dragon_ball_characters, "go")

    assert [c.name for c in result] == ["Goku", "Gohan"]


def test_filter_characters_name_is_not_substring(dragon_ball_characters):
    from charbrowser.managers.search_manager import filter_characters

    assert filter_characters(dragon_ball_characters, "colo") == []


def test_filter_characters_category_substring(dragon_ball_characters):
    from charbrowser.managers.search_manager import filter_characters

    assert [c.name for c in filter_characters(dragon_ball_characters, "sai")] == ["Goku", "Gohan"]
    assert [c.name for c in filter_characters(dragon_ball_characters, "kian")] == ["Piccolo"]


def test_filter_characters_ignores_case_and_accents():
    from charbrowser.managers.search_manager import filter_characters

    characters = [
        make_character(1, "Ángel", "Angel"),
        make_character(2, "angela", "Human"),
        make_character(3, "Zeno", "Dios"),
    ]

    assert [c.id for c in filter_characters(characters, "ÁNG")] == [1, 2]
    assert [c.id for c in filter_characters(characters, "díos")] == [3]


def test_search_manager_initial_state():
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()

    assert manager.get_query() == ""
    assert manager.is_active() is False


def test_search_manager_keeps_query_verbatim():
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()

    changed = manager.set_query("  Gokú ")

    assert changed is True
    assert manager.get_query() == "  Gokú "
    assert manager.normalized_query == "goku"
    assert manager.is_active() is True


def test_search_manager_reports_unchanged_normalized_query():
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()
    manager.set_query("goku")

    assert manager.set_query("GOKÚ") is False
    assert manager.get_query() == "GOKÚ"


def test_search_manager_active_on_trimmed_query():
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()

    manager.set_query("  ")
    assert manager.is_active() is False

    manager.set_query("\u0301")
    assert manager.normalized_query == ""
    assert manager.is_active() is True


def test_search_manager_clear():
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()
    manager.set_query("vegeta")

    manager.clear()

    assert manager.get_query() == ""
    assert manager.is_active() is False


def test_search_manager_apply_caches_by_version(dragon_ball_characters):
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()
    manager.set_query("go")
    characters = list(dragon_ball_characters)

    first = manager.apply(characters, version=1)
    characters.append(make_character(4, "Gotenks"))
    cached = manager.apply(characters, version=1)
    updated = manager.apply(characters, version=2)

    assert [c.id for c in first] == [1, 2]
    assert [c.id for c in cached] == [1, 2]
    assert [c.id for c in updated] == [1, 2, 4]


def test_search_manager_apply_recomputes_on_query_change(dragon_ball_characters):
    from charbrowser.managers.search_manager import SearchManager

    manager = SearchManager()
    manager.set_query("go")
    manager.apply(dragon_ball_characters, version=1)

    manager.set_query("pic")

    assert [c.name for c in manager.apply(dragon_ball_characters, version=1)] == ["Piccolo"]
