import pytest

from advsearch.app.search_controller import SearchController
from advsearch.core.search_config import SearchSettings
from advsearch.core.search_mode import EnabledModes, SearchMode


@pytest.fixture
def controller(qapp):
    """Controller with every mode enabled and a base hint."""
    return SearchController(query_hint="Search apps")


@pytest.fixture
def recorder():
    """Collects signal emissions in order."""
    events = []

    def record(name):
        return lambda *args: events.append((name, *args))

    return events, record


def test_defaults(controller):
    assert controller.query == ""
    assert controller.mode is SearchMode.CONTAINS
    assert controller.enabled_modes == EnabledModes.all()
    assert controller.hint_text() == "Search apps (Contains)"


def test_initial_mode_must_be_enabled(qapp):
    with pytest.raises(ValueError, match="not enabled"):
        SearchController(
            enabled_modes=EnabledModes([SearchMode.PREFIX]),
            mode=SearchMode.FUZZY,
        )


def test_set_query_emits_text_and_mode(controller, qtbot):
    with qtbot.waitSignal(controller.query_changed, timeout=1000) as blocker:
        controller.set_query("term")

    assert blocker.args == ["term", SearchMode.CONTAINS]
    assert controller.query == "term"


def test_submit_emits_current_query(controller, qtbot):
    controller.set_query("needle ")

    with qtbot.waitSignal(controller.query_submitted, timeout=1000) as blocker:
        controller.submit()

    assert blocker.args == ["needle ", SearchMode.CONTAINS]


def test_set_mode_reemits_query(controller, recorder):
    events, record = recorder
    controller.set_query("abc")
    controller.mode_changed.connect(record("mode"))
    controller.query_changed.connect(record("query"))

    controller.set_mode(SearchMode.REGEX)

    assert controller.mode is SearchMode.REGEX
    assert events == [
        ("mode", SearchMode.REGEX),
        ("query", "abc", SearchMode.REGEX),
    ]
    assert controller.hint_text() == "Search apps (Regular expressions)"


def test_set_same_mode_is_silent(controller, recorder):
    events, record = recorder
    controller.mode_changed.connect(record("mode"))

    controller.set_mode(SearchMode.CONTAINS)

    assert events == []


def test_set_disabled_mode_rejected(qapp):
    controller = SearchController(enabled_modes=EnabledModes([SearchMode.CONTAINS]))
    with pytest.raises(ValueError):
        controller.set_mode(SearchMode.FUZZY)
    assert controller.mode is SearchMode.CONTAINS


def test_disabling_active_mode_switches_to_first_enabled(controller, recorder):
    events, record = recorder
    controller.set_mode(SearchMode.FUZZY)
    controller.enabled_modes_changed.connect(record("enabled"))
    controller.mode_changed.connect(record("mode"))

    controller.remove_enabled_modes(SearchMode.CONTAINS, SearchMode.FUZZY)

    assert list(controller.enabled_modes) == [
        SearchMode.PREFIX,
        SearchMode.SUFFIX,
        SearchMode.REGEX,
    ]
    assert controller.mode is SearchMode.PREFIX
    assert events == [("mode", SearchMode.PREFIX), ("enabled",)]


def test_enabled_modes_listener_sees_enabled_active_mode(controller):
    seen = []
    controller.set_mode(SearchMode.REGEX)
    controller.enabled_modes_changed.connect(
        lambda: seen.append(controller.mode in controller.enabled_modes)
    )

    controller.remove_enabled_modes(SearchMode.REGEX)

    assert seen == [True]
    assert controller.mode is SearchMode.CONTAINS


def test_removing_every_mode_rejected(qapp):
    controller = SearchController(
        enabled_modes=EnabledModes([SearchMode.SUFFIX]), mode=SearchMode.SUFFIX
    )
    with pytest.raises(ValueError):
        controller.remove_enabled_modes(SearchMode.SUFFIX)
    assert list(controller.enabled_modes) == [SearchMode.SUFFIX]


def test_add_enabled_modes(qapp):
    controller = SearchController(enabled_modes=EnabledModes([SearchMode.CONTAINS]))
    controller.add_enabled_modes(SearchMode.FUZZY)
    controller.set_mode(SearchMode.FUZZY)
    assert controller.mode is SearchMode.FUZZY


def test_filter_uses_current_state(controller, contacts):
    controller.set_query("Turing")
    result = controller.filter(contacts, lambda c: c.name)
    assert [c.name for c in result] == ["Alan Turing"]

    controller.set_mode(SearchMode.PREFIX)
    assert controller.filter(contacts, lambda c: c.name) == []
    assert controller.filter(None, lambda c: c.name) is None


def test_filter_uses_settings(qapp):
    controller = SearchController(settings=SearchSettings(case_sensitive=False))
    controller.set_query("APP")
    assert controller.filter(["apple", "kiwi"], str) == ["apple"]


def test_set_query_hint(controller):
    controller.set_query_hint("Find")
    assert controller.hint_text() == "Find (Contains)"
