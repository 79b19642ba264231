import pytest

from unseenia.gui import (
    Button,
    ButtonState,
    DropDownList,
    ProgressBar,
    TextureSelector,
    calc_char_size,
    p2p_x,
    p2p_y,
)
from unseenia.settings import VideoMode

VM = VideoMode(1920, 1080)


def test_full_percentage_is_whole_resolution():
    assert p2p_x(100.0, VM) == VM.width
    assert p2p_y(100.0, VM) == VM.height


def test_percentage_rounds_down():
    assert p2p_x(33.3, VideoMode(10, 10)) == 3


def test_calc_char_size():
    assert calc_char_size(VideoMode(1200, 600)) == 30
    vm = VideoMode(800, 600)
    assert calc_char_size(vm, vm.width + vm.height) == 1
    with pytest.raises(ValueError):
        calc_char_size(vm, 0)


def test_button_states_and_colors():
    button = Button(
        10, 10, 100, 40, "Go",
        idle_color=(1, 1, 1, 1), hover_color=(2, 2, 2, 2), active_color=(3, 3, 3, 3),
    )
    button.update((500, 500), True)
    assert button.state == ButtonState.IDLE
    assert button.fill_color == (1, 1, 1, 1)
    button.update((20, 20), False)
    assert button.state == ButtonState.HOVER
    assert button.fill_color == (2, 2, 2, 2)
    assert not button.is_pressed()
    button.update((20, 20), True)
    assert button.is_pressed()
    assert button.fill_color == (3, 3, 3, 3)


def test_drop_down_list_selects_choice():
    labels = ["800x600", "1024x768", "1920x1080"]
    x, y, w, h = 100.0, 100.0, 200.0, 30.0
    ddl = DropDownList(x, y, w, h, labels)
    assert ddl.active_element_id == 0

    ddl.update((x + 1, y + 1), True, 0.1)
    assert ddl.show_list is True

    ddl.update((x + 1, y + 2 * h + 1), True, 0.1)
    assert ddl.show_list is False
    assert ddl.active_element_id == 1
    assert ddl.active_element.text == labels[1]


def test_drop_down_list_needs_key_time():
    ddl = DropDownList(0, 0, 100, 20, ["a", "b"])
    ddl.update((1, 1), True, 0.0)
    assert ddl.show_list is False


def test_drop_down_list_empty_labels():
    with pytest.raises(IndexError):
        DropDownList(0, 0, 100, 20, [])


def test_texture_selector_picks_cell():
    grid = 64.0
    sel = TextureSelector(20.0, 20.0, 1000.0, 500.0, grid, 512, 256, "TS")
    left, top = sel.bounds.left, sel.bounds.top
    sel.update((left + 2 * grid + 5, top + grid + 5), False, 0.0)
    assert sel.active is True
    assert sel.mouse_pos_grid == (2, 1)
    assert sel.texture_rect.left == int(2 * grid)
    assert sel.texture_rect.top == int(grid)


def test_texture_selector_inactive_outside():
    sel = TextureSelector(20.0, 20.0, 1000.0, 500.0, 64.0, 512, 256, "TS")
    sel.update((5000, 5000), False, 0.0)
    assert sel.active is False


def test_texture_selector_clips_sheet_and_hides():
    sel = TextureSelector(20.0, 20.0, 300.0, 200.0, 64.0, 2000, 100, "TS")
    assert sel.sheet_bounds.width == 300.0
    assert sel.sheet_bounds.height == 100
    sel.update((21, 21), True, 0.1)
    assert sel.hidden is True


def test_progress_bar():
    bar = ProgressBar(1.0, 5.0, 10.0, 2.0, 10, VM)
    assert bar.max_width == p2p_x(10.0, VM)
    bar.update(10)
    assert bar.inner.width == bar.max_width
    bar.update(0)
    assert bar.inner.width == 0
    bar.update(5)
    assert bar.text == "5 / 10"
    assert 0 < bar.inner.width < bar.max_width


def test_progress_bar_zero_max():
    with pytest.raises(ValueError):
        ProgressBar(1.0, 1.0, 1.0, 1.0, 0, VM)