"""Tests for the matrix rain motion."""

import numpy as np
import pytest

from busycrab.core.terminal import CLEAR_HOME, HIDE_CURSOR, SHOW_CURSOR
from busycrab.motion.matrix import (
    DIM_COLOR,
    HEAD_COLOR,
    SYMBOLS,
    MatrixMotion,
    tail_color,
)


@pytest.fixture
def rain(make_screen):
    screen = make_screen((22, 10))  # 20 columns x 10 rows
    return screen, MatrixMotion(screen.terminal, seed=1234)


class TestMatrixSetup:

    def test_grid_matches_terminal(self, rain):
        _, motion = rain
        assert motion.columns == 20
        assert motion.rows == 10
        assert motion.drops.shape == (20,)
        assert motion.grid.shape == (10, 20)

    def test_drops_start_off_screen(self, rain):
        _, motion = rain
        assert (motion.drops <= 0).all()
        assert (motion.drops > -10).all()

    def test_default_size_without_terminal(self, make_screen):
        motion = MatrixMotion(make_screen(None).terminal, seed=1)
        assert (motion.columns, motion.rows) == (78, 20)

    def test_symbols_include_signature(self):
        assert "GUINETIK" in "".join(SYMBOLS)


class TestDrops:

    def test_drops_advance_by_one(self, rain):
        _, motion = rain
        motion.rng = np.random.default_rng(0)
        motion.drops = np.full(motion.columns, 2.0)
        before = motion.drops.copy()
        motion.update_drops()
        advanced = motion.drops == before + 1.0
        restarted = motion.drops <= 0
        assert (advanced | restarted).all()
        assert advanced.sum() >= motion.columns - 5

    def test_spent_drops_restart_above_screen(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, motion.rows + 11.0)
        motion.update_drops()
        assert (motion.drops <= 0).all()
        assert (motion.drops > -motion.rows).all()

    def test_drop_at_overshoot_limit_keeps_falling(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, motion.rows + 10.0)
        motion.update_drops()
        assert ((motion.drops == motion.rows + 11.0) | (motion.drops <= 0)).all()


class TestGrid:

    def test_zones(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, 5.5)
        head, tail = motion.zones()
        assert head[5].all()
        assert not head[4].any()
        # rows 0..4 are within 8 rows above a head at 5.5
        assert tail[:5].all()
        assert not tail[5:].any()

    def test_head_always_gets_a_symbol(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, 3.0)
        motion.grid[:] = " "
        motion.update_grid()
        assert all(ch in SYMBOLS for ch in motion.grid[3])

    def test_background_mostly_blank(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, -50.0)
        motion.update_grid()
        blanks = (motion.grid == " ").sum()
        assert blanks > motion.grid.size * 0.8

    def test_tail_keeps_symbols_mostly(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, 9.0)
        motion.grid[:] = "A"
        motion.update_grid()
        tail = motion.grid[2:9]
        assert (tail != " ").all()
        assert (tail == "A").sum() > tail.size * 0.7


class TestColors:

    def test_tail_color_fades(self):
        colors = tail_color(np.array([1.0, 3.0, 5.0, 7.9]))
        assert list(colors) == [27, 26, 24, 22]
        assert (np.diff(colors) <= 0).all()

    def test_cell_colors_by_zone(self, rain):
        _, motion = rain
        motion.drops = np.full(motion.columns, 4.0)
        colors = motion.cell_colors()
        assert (colors[4] == HEAD_COLOR).all()
        assert (colors[3] == 27).all()
        assert (colors[9] == DIM_COLOR).all()


class TestResize:

    def test_grow_preserves_existing_drops(self, rain):
        _, motion = rain
        motion.drops = np.arange(motion.columns, dtype=np.float64)
        motion.resize(30, 12)
        assert motion.drops.shape == (30,)
        assert list(motion.drops[:20]) == list(range(20))
        assert (motion.drops[20:] == -1.0).all()
        assert motion.grid.shape == (12, 30)

    def test_shrink_keeps_overlap(self, rain):
        _, motion = rain
        motion.grid[:] = "Z"
        motion.resize(5, 3)
        assert motion.grid.shape == (3, 5)
        assert (motion.grid == "Z").all()
        assert motion.drops.shape == (5,)

    def test_update_follows_terminal_resize(self, rain):
        screen, motion = rain
        motion.update()
        screen.size = (42, 15)
        motion.update()
        assert (motion.columns, motion.rows) == (40, 15)
        assert motion.grid.shape == (15, 40)

    def test_collapse_to_zero(self, rain):
        screen, motion = rain
        screen.size = (0, 0)
        motion.update()
        motion.update()
        assert motion.grid.shape == (0, 0)


class TestRendering:

    def test_first_frame_hides_cursor_and_clears(self, rain):
        screen, motion = rain
        motion.update()
        assert screen.output.startswith(HIDE_CURSOR + CLEAR_HOME)
        assert screen.output.count(HIDE_CURSOR) == 1

    def test_frame_has_one_line_per_row(self, rain):
        screen, motion = rain
        motion.update()
        body = screen.output.split(CLEAR_HOME)[-1]
        assert body.count("\n") == motion.rows

    def test_close_restores_terminal(self, rain):
        screen, motion = rain
        motion.update()
        motion.close()
        assert screen.output.endswith(SHOW_CURSOR + "\033[0m")
