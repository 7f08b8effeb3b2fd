"""Tests for src/presentation/table.py."""

import pytest

from src.domain.models.enums import SortDirection
from src.domain.models.resources import ServiceRequest
from src.presentation.table import (
    ACTIONS_HEADER,
    DEFAULT_EMPTY_MESSAGE,
    LIMIT_OPTIONS,
    BodyState,
    Column,
    CustomAction,
    DataTable,
    Pagination,
    TableActions,
    pagination_view,
)

COLUMNS = [
    Column("Titre", "title", sortable=True),
    Column("Statut", "status"),
    Column("Montant", "amount", sortable=True),
]

ROWS = [
    {"_id": "a", "title": "borne", "status": "pending", "amount": 30},
    {"_id": "b", "title": "Audit", "status": "completed", "amount": None},
    {"_id": "c", "title": "wallbox", "status": "pending", "amount": 0},
]


def _pagination(page=1, limit=10, total=0, on_limit_change=None):
    calls = []
    return Pagination(page, limit, total, calls.append, on_limit_change), calls


# --- Body states ---

def test_loading_wins_over_data():
    view = DataTable(COLUMNS).render(ROWS, is_loading=True)
    assert view.state is BodyState.LOADING
    assert view.show_spinner
    assert view.rows == ()


def test_empty_state_uses_default_message():
    view = DataTable(COLUMNS).render([])
    assert view.state is BodyState.EMPTY
    assert view.empty_message == DEFAULT_EMPTY_MESSAGE
    assert view.headers == ()


def test_none_data_is_empty():
    assert DataTable(COLUMNS).render(None).state is BodyState.EMPTY


def test_custom_empty_message():
    view = DataTable(COLUMNS, empty_message="Aucune demande").render([])
    assert view.empty_message == "Aucune demande"


def test_rows_in_input_order_keyed_by_key_field():
    view = DataTable(COLUMNS).render(ROWS)
    assert view.state is BodyState.ROWS
    assert [r.key for r in view.rows] == ["a", "b", "c"]


# --- Cells ---

def test_none_renders_blank_and_zero_renders_zero():
    view = DataTable(COLUMNS).render(ROWS)
    assert view.rows[1].cells[2] == ""
    assert view.rows[2].cells[2] == "0"


def test_callable_accessor_and_cell_override():
    columns = [
        Column("Code", lambda item: item["_id"].upper()),
        Column("Titre", "title", cell=lambda item: f"<{item['title']}>"),
    ]
    view = DataTable(columns).render(ROWS[:1])
    assert view.rows[0].cells == ("A", "<borne>")


def test_enum_values_render_as_their_value():
    req = ServiceRequest.model_validate({"_id": "r1", "title": "x", "status": "in-progress"})
    view = DataTable([Column("Statut", "status")]).render([req])
    assert view.rows[0].cells == ("in-progress",)
    assert view.rows[0].key == "r1"


def test_callable_accessor_is_never_sortable():
    assert not Column("x", lambda item: 1, sortable=True).is_sortable


# --- Sorting ---

def test_toggle_sort_sets_ascending_then_flips():
    table = DataTable(COLUMNS)
    table.toggle_sort("title")
    assert (table.sort_field, table.sort_direction) == ("title", SortDirection.ASC)
    table.toggle_sort("title")
    assert table.sort_direction is SortDirection.DESC


def test_toggle_sort_new_field_resets_to_ascending():
    table = DataTable(COLUMNS)
    table.toggle_sort("title")
    table.toggle_sort("title")
    table.toggle_sort("amount")
    assert (table.sort_field, table.sort_direction) == ("amount", SortDirection.ASC)


def test_toggle_sort_ignores_non_sortable_columns():
    table = DataTable(COLUMNS)
    table.toggle_sort("status")
    table.toggle_sort("unknown")
    assert table.sort_field is None


def test_sort_indicator_only_on_sorted_column():
    table = DataTable(COLUMNS)
    table.toggle_sort("title")
    table.toggle_sort("title")
    headers = table.render(ROWS).headers
    assert headers[0].indicator == "↓"
    assert headers[1].indicator is None
    assert headers[2].indicator is None


def test_sort_is_visual_only_by_default():
    table = DataTable(COLUMNS)
    table.toggle_sort("title")
    assert [r.key for r in table.render(ROWS).rows] == ["a", "b", "c"]


def test_client_side_sort_is_case_insensitive():
    table = DataTable(COLUMNS, client_side_sort=True)
    table.toggle_sort("title")
    assert [r.key for r in table.render(ROWS).rows] == ["b", "a", "c"]


def test_client_side_sort_keeps_missing_values_last():
    table = DataTable(COLUMNS, client_side_sort=True)
    table.toggle_sort("amount")
    assert [r.key for r in table.render(ROWS).rows] == ["c", "a", "b"]
    table.toggle_sort("amount")
    assert [r.key for r in table.render(ROWS).rows] == ["a", "c", "b"]


def test_client_side_sort_is_stable():
    rows = [
        {"_id": "1", "title": "same", "amount": 1},
        {"_id": "2", "title": "same", "amount": 2},
        {"_id": "3", "title": "same", "amount": 3},
    ]
    table = DataTable(COLUMNS, client_side_sort=True)
    table.toggle_sort("title")
    assert [r.key for r in table.render(rows).rows] == ["1", "2", "3"]


# --- Actions and row clicks ---

def test_actions_column_present_only_with_actions():
    assert ACTIONS_HEADER not in [h.label for h in DataTable(COLUMNS).render(ROWS).headers]
    table = DataTable(COLUMNS, actions=TableActions(edit=lambda item: None))
    view = table.render(ROWS)
    assert view.headers[-1].label == ACTIONS_HEADER
    assert view.rows[0].actions == ("edit",)


def test_empty_table_actions_is_falsy():
    assert not TableActions()
    assert DataTable(COLUMNS, actions=TableActions()).render(ROWS).rows[0].actions == ()


def test_action_order_builtin_then_custom():
    actions = TableActions(
        delete=lambda item: None,
        view=lambda item: None,
        custom=[CustomAction("Assigner", lambda item: None)],
    )
    assert actions.names() == ("view", "delete", "Assigner")


def test_trigger_action_calls_only_that_handler():
    seen = []
    actions = TableActions(
        view=lambda item: seen.append(("view", item["_id"])),
        delete=lambda item: seen.append(("delete", item["_id"])),
        custom=[CustomAction("Assigner", lambda item: seen.append(("assign", item["_id"])))],
    )
    clicked = []
    table = DataTable(COLUMNS, actions=actions, on_row_click=clicked.append)
    table.trigger_action("delete", ROWS[0])
    table.trigger_action("Assigner", ROWS[1])
    assert seen == [("delete", "a"), ("assign", "b")]
    assert clicked == []


def test_trigger_unknown_action_raises():
    with pytest.raises(KeyError):
        DataTable(COLUMNS, actions=TableActions(view=print)).trigger_action("edit", ROWS[0])
    with pytest.raises(KeyError):
        DataTable(COLUMNS).trigger_action("view", ROWS[0])


def test_click_row_calls_handler():
    clicked = []
    table = DataTable(COLUMNS, on_row_click=clicked.append)
    assert table.render(ROWS).rows[0].clickable
    table.click_row(ROWS[2])
    assert clicked == [ROWS[2]]


def test_click_row_without_handler_is_noop():
    table = DataTable(COLUMNS)
    assert not table.render(ROWS).rows[0].clickable
    table.click_row(ROWS[0])


# --- Search box ---

def test_search_placeholder_only_with_on_search():
    assert DataTable(COLUMNS).render(ROWS).search_placeholder is None


async def test_search_placeholder_default():
    table = DataTable(COLUMNS, on_search=lambda term: None)
    assert table.render(ROWS).search_placeholder == "Rechercher..."


# --- Pagination ---

def test_pagination_window():
    p, _ = _pagination(page=2, limit=10, total=25)
    assert (p.start, p.end, p.total_pages) == (11, 20, 3)


def test_pagination_last_partial_page():
    p, _ = _pagination(page=3, limit=10, total=25)
    assert (p.start, p.end) == (21, 25)
    assert not p.has_next


def test_pagination_zero_total():
    p, _ = _pagination(total=0)
    view = pagination_view(p)
    assert view.summary == "Affichage de 0 à 0 sur 0 éléments"
    assert view.page_label == "Page 1 sur 1"
    assert view.previous_disabled
    assert view.next_disabled


def test_pagination_view_labels():
    p, _ = _pagination(page=2, limit=10, total=25)
    view = pagination_view(p)
    assert view.summary == "Affichage de 11 à 20 sur 25 éléments"
    assert view.page_label == "Page 2 sur 3"
    assert not view.previous_disabled
    assert not view.next_disabled


def test_limit_options_only_with_limit_callback():
    p, _ = _pagination(total=5)
    assert pagination_view(p).limit_options == ()
    p, _ = _pagination(total=5, on_limit_change=lambda limit: None)
    assert pagination_view(p).limit_options == LIMIT_OPTIONS


def test_pagination_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        Pagination(1, 0, 10, lambda page: None)


def test_previous_and_next_call_page_change():
    p, calls = _pagination(page=2, limit=10, total=25)
    DataTable.previous_page(p)
    DataTable.next_page(p)
    assert calls == [1, 3]


def test_previous_on_first_page_is_noop():
    p, calls = _pagination(page=1, limit=10, total=25)
    DataTable.previous_page(p)
    assert calls == []


def test_next_on_last_page_is_noop():
    p, calls = _pagination(page=3, limit=10, total=25)
    DataTable.next_page(p)
    assert calls == []


def test_change_limit_calls_callback():
    limits = []
    p, _ = _pagination(total=25, on_limit_change=limits.append)
    DataTable.change_limit(p, 50)
    assert limits == [50]


def test_pagination_shown_in_empty_and_loading_states():
    p, _ = _pagination(total=0)
    table = DataTable(COLUMNS)
    assert table.render([], pagination=p).pagination is not None
    assert table.render(ROWS, is_loading=True, pagination=p).pagination is not None
