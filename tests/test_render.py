import random

import pygame
import pytest

from snake_client.layout import Layout
from snake_client.render import Renderer
from snake_engine import world
from snake_engine.storage import Settings
from snake_engine.utils import Cell


@pytest.fixture
def renderer():
    pygame.init()
    layout = Layout(20)
    screen = pygame.Surface(layout.window_size)
    yield Renderer(screen, layout)
    pygame.quit()


def color_at(renderer, pos):
    return tuple(renderer.screen.get_at(pos))[:3]


def test_draws_head_and_food(renderer):
    state = world.new_game(20, rng=random.Random(5))
    state.food = Cell(2, 3)
    renderer.draw(state, Settings())

    assert color_at(renderer, renderer.layout.cell_rect(Cell(10, 10)).center) == renderer.head_color
    assert color_at(renderer, renderer.layout.cell_rect(Cell(2, 3)).center) == renderer.food_color
    assert color_at(renderer, renderer.layout.cell_rect(Cell(15, 15)).center) == renderer.background_color


def test_game_over_overlay_shows_restart_button(renderer):
    state = world.new_game(20, rng=random.Random(5))
    state.food = Cell(1, 1)
    state.phase = world.GamePhase.GAME_OVER
    renderer.draw(state, Settings())

    button = renderer.layout.retry_button
    assert color_at(renderer, (button.left + 5, button.centery)) == renderer.button_color
    # The board underneath is hidden by the overlay.
    assert color_at(renderer, renderer.layout.cell_rect(Cell(1, 1)).center) == renderer.background_color


def test_selected_options_are_highlighted(renderer):
    state = world.new_game(20, rng=random.Random(5))
    renderer.draw(state, Settings(speed="fast", grid_size="small"))
    fast = renderer.layout.speed_buttons["fast"]
    slow = renderer.layout.speed_buttons["slow"]
    assert color_at(renderer, (fast.left + 6, fast.top + 6)) == renderer.head_color
    assert color_at(renderer, (slow.left + 6, slow.top + 6)) == renderer.panel_color
