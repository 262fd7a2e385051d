from snake_client.layout import Layout
from snake_engine.utils import Cell


def test_tile_size_follows_grid():
    assert Layout(20).tile_size == 20
    assert Layout(40).tile_size == 10
    assert Layout(30).window_size == (400, 510)


def test_cell_rect_leaves_a_pixel_gap():
    rect = Layout(20).cell_rect(Cell(10, 10))
    assert (rect.x, rect.y, rect.width, rect.height) == (200, 200, 19, 19)


def test_retry_button_geometry():
    button = Layout(20).retry_button
    assert (button.x, button.y, button.width, button.height) == (100, 240, 200, 56)


def test_retry_hit_test_is_inclusive():
    layout = Layout(20)
    button = layout.retry_button
    assert layout.in_retry_button((button.left, button.top))
    assert layout.in_retry_button((button.right, button.bottom))
    assert not layout.in_retry_button((button.left - 1, button.top))


def test_selectors_sit_in_the_panel_without_overlap():
    layout = Layout(20)
    buttons = list(layout.speed_buttons.values()) + list(layout.grid_buttons.values())
    for index, rect in enumerate(buttons):
        assert layout.panel_rect.contains(rect)
        for other in buttons[index + 1:]:
            assert not rect.colliderect(other)
