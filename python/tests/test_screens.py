"""Screen state machine tests — menus, transitions, and render descriptions."""

from __future__ import annotations

import copy

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models.board import BoardState, Mark
from backend.models.keys import Key
from backend.screens import (
    EXIT,
    STAY,
    EndScreen,
    GameScreen,
    HomeScreen,
    Screen,
    SettingsScreen,
    TransitionTo,
)
from backend.screens.game import render_board
from backend.screens.menu import Menu, MenuEntry


# -- helpers ------------------------------------------------------------------


def _game_screen(solution: list[list[bool]]) -> GameScreen:
    return GameScreen(GamePlay.from_board(BoardState.from_solution(solution)))


def _select(screen: SettingsScreen, label: str) -> None:
    for i, entry in enumerate(screen.menu.entries):
        if entry.text == label:
            screen.menu.selected = i
            return
    raise AssertionError(f"No entry labelled {label!r}")


def _emphasised(screen: Screen, region: str) -> list[str]:
    lines = screen.render().region(region).lines
    return [seg.text for line in lines for seg in line if seg.emphasis]


# -- protocol -----------------------------------------------------------------


def test_every_screen_satisfies_protocol() -> None:
    state = GameState.from_board(BoardState.from_solution([[True]]))
    screens = [
        HomeScreen.create(),
        SettingsScreen.create(),
        _game_screen([[True]]),
        EndScreen(state),
    ]
    for screen in screens:
        assert isinstance(screen, Screen)


# -- menu ---------------------------------------------------------------------


def test_menu_requires_entries() -> None:
    with pytest.raises(ValueError):
        Menu([])


def test_menu_region_emphasises_selection() -> None:
    menu = Menu([MenuEntry("a", "A"), MenuEntry("b", "B")])
    menu.move_next()
    region = menu.region()
    assert [line[0].emphasis for line in region.lines] == [False, True]


# -- home ---------------------------------------------------------------------


def test_home_selection_clamps() -> None:
    home = HomeScreen.create()
    assert home.menu.selected == 0
    assert home.handle_input(Key.DOWN) == STAY
    assert home.menu.selected == 1
    home.handle_input(Key.DOWN)
    assert home.menu.selected == 1
    home.handle_input(Key.UP)
    home.handle_input(Key.UP)
    assert home.menu.selected == 0


def test_home_play_goes_to_settings() -> None:
    outcome = HomeScreen.create().handle_input(Key.ENTER)
    assert isinstance(outcome, TransitionTo)
    assert isinstance(outcome.screen, SettingsScreen)
    assert outcome.screen.menu.selected == 0


def test_home_quit_exits() -> None:
    home = HomeScreen.create()
    home.handle_input(Key.DOWN)
    assert home.handle_input(Key.ENTER) == EXIT


@pytest.mark.parametrize("key", [Key.LEFT, Key.TOGGLE, Key.CHECK, "x", ""])
def test_home_ignores_other_keys(key: str) -> None:
    home = HomeScreen.create()
    assert home.handle_input(key) == STAY
    assert home.menu.selected == 0


def test_home_render_marks_selected_entry() -> None:
    home = HomeScreen.create()
    assert _emphasised(home, "menu") == ["Play!"]
    home.handle_input(Key.DOWN)
    assert _emphasised(home, "menu") == ["Quit!"]


# -- settings -----------------------------------------------------------------


def test_settings_entries() -> None:
    settings = SettingsScreen.create()
    assert [e.text for e in settings.menu.entries] == ["5×5", "10×10", "15×15", "Back"]


def test_settings_rejects_zero_size() -> None:
    with pytest.raises(ValueError):
        SettingsScreen.create(sizes=(5, 0))


@pytest.mark.parametrize(("label", "size"), [("5×5", 5), ("10×10", 10), ("15×15", 15)])
def test_settings_size_starts_game(label: str, size: int) -> None:
    settings = SettingsScreen.create()
    _select(settings, label)
    outcome = settings.handle_input(Key.ENTER)
    assert isinstance(outcome, TransitionTo)
    assert isinstance(outcome.screen, GameScreen)
    assert outcome.screen.game.board.size == size
    assert outcome.screen.game.state.settings.size == size


def test_settings_back_goes_home() -> None:
    settings = SettingsScreen.create()
    _select(settings, "Back")
    outcome = settings.handle_input(Key.ENTER)
    assert isinstance(outcome, TransitionTo)
    assert isinstance(outcome.screen, HomeScreen)


def test_settings_navigation_clamps() -> None:
    settings = SettingsScreen.create()
    for _ in range(10):
        settings.handle_input(Key.DOWN)
    assert settings.menu.current.text == "Back"
    for _ in range(10):
        settings.handle_input(Key.UP)
    assert settings.menu.selected == 0


# -- game ---------------------------------------------------------------------


def test_game_arrows_move_cursor() -> None:
    screen = _game_screen([[True, False], [False, True]])
    assert screen.handle_input(Key.DOWN) == STAY
    assert screen.handle_input(Key.RIGHT) == STAY
    assert screen.game.board.cursor == (1, 1)
    screen.handle_input(Key.RIGHT)
    assert screen.game.board.cursor == (1, 1)


def test_game_toggle_marks_cursor_cell() -> None:
    screen = _game_screen([[True, False], [False, True]])
    screen.handle_input(Key.RIGHT)
    screen.handle_input(Key.TOGGLE)
    assert screen.game.board.get_mark(0, 1) is Mark.FILLED


def test_game_failed_check_stays_and_records() -> None:
    screen = _game_screen([[True, False], [False, True]])
    assert screen.handle_input(Key.CHECK) == STAY
    assert screen.game.board.last_mismatch == (0, 0)
    status = screen.render().region("status").plain()
    assert status == ["Not yet: row 1, column 1 is wrong."]


def test_game_successful_check_ends_game() -> None:
    screen = _game_screen([[True]])
    screen.handle_input(Key.TOGGLE)
    outcome = screen.handle_input(Key.CHECK)
    assert isinstance(outcome, TransitionTo)
    assert isinstance(outcome.screen, EndScreen)
    assert outcome.screen.end_game_state is screen.game.state


@pytest.mark.parametrize("key", [Key.ENTER, "z", ""])
def test_game_ignores_other_keys(key: str) -> None:
    screen = _game_screen([[True]])
    assert screen.handle_input(key) == STAY
    assert screen.game.board.get_mark(0, 0) is Mark.UNMARKED


def test_game_render_has_no_status_before_check() -> None:
    screen = _game_screen([[True]])
    assert screen.render().region("status").lines == ()


def test_game_render_does_not_mutate() -> None:
    screen = _game_screen([[True, False], [False, True]])
    before = copy.deepcopy(screen.game.board)
    screen.render()
    assert screen.game.board == before


def test_render_board_layout() -> None:
    board = BoardState.from_solution(
        [
            [True, False, True],
            [False, False, False],
            [True, True, False],
        ]
    )
    board.assigned[0][0] = Mark.FILLED
    board.assigned[0][1] = Mark.EMPTY
    board.cursor = (2, 1)

    lines = render_board(board)
    plain = ["".join(seg.text for seg in line) for line in lines]
    assert plain == [
        "    1    ",
        "    1 1 1",
        "1 1 # X .",
        "  0 . . .",
        "  2 . . .",
    ]
    emphasised = [
        (i, seg.text) for i, line in enumerate(lines) for seg in line if seg.emphasis
    ]
    assert emphasised == [(4, ".")]


# -- end ----------------------------------------------------------------------


def test_end_screen_stats() -> None:
    state = GameState.from_board(
        BoardState.from_solution([[True, True], [False, True]])
    )
    end = EndScreen(state)
    assert end.stats.total_cells == 4
    assert end.stats.filled_cells == 3
    assert end.render().region("stats").plain() == [
        "Total squares: 4",
        "Black squares: 3",
    ]


def test_end_screen_enter_returns_home() -> None:
    state = GameState.from_board(BoardState.from_solution([[True]]))
    outcome = EndScreen(state).handle_input(Key.ENTER)
    assert isinstance(outcome, TransitionTo)
    assert isinstance(outcome.screen, HomeScreen)


def test_end_screen_tells_how_to_return_home() -> None:
    state = GameState.from_board(BoardState.from_solution([[True]]))
    controls = EndScreen(state).render().region("controls").plain()
    assert controls == ["Press Enter to return home   Q quit"]


@pytest.mark.parametrize("key", [Key.UP, Key.TOGGLE, Key.CHECK, "x"])
def test_end_screen_ignores_other_keys(key: str) -> None:
    state = GameState.from_board(BoardState.from_solution([[True]]))
    assert EndScreen(state).handle_input(key) == STAY
