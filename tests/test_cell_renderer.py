"""Tests for drawing of individual diagram cells."""

import pytest

from diagram.cells import StoneColor
from diagram.config import FontMetrics
from diagram.grid import build_grid
from renderer.cell_renderer import CellRenderer
from renderer.layout import compute_layout

BLACK = "rgb(0, 0, 0)"
WHITE = "rgb(255, 255, 255)"
RED = "rgb(255, 55, 55)"
GOBAN = "rgb(242, 176, 109)"
LINK = "rgb(202, 106, 69)"


def make_renderer(body, first_color=StoneColor.BLACK, start_move=1, links=None):
    grid = build_grid(body)
    layout = compute_layout(grid, FontMetrics(), coordinates=False)
    return CellRenderer(grid, layout, FontMetrics(), first_color=first_color, start_move=start_move, links=links)


def draw(body, row, col, **kwargs):
    renderer = make_renderer(body, **kwargs)
    cell = renderer.grid.cell_at(row, col)
    x = renderer.layout.column_centers()[col - renderer.layout.start_col]
    y = renderer.layout.row_centers()[row - renderer.layout.start_row]
    return renderer.render_cell(row, col, cell, x, y)


class TestStones:
    """Test plain and marked stones."""

    def test_black_stone(self):
        item = draw("X\n", 0, 0)

        assert item == (
            f'<circle cx="10.5" cy="10.5" r="8.5" stroke="{BLACK}" fill="{BLACK}" class="blackstone" />\n'
        )

    def test_white_stone_has_black_outline(self):
        item = draw("O\n", 0, 0)

        assert f'stroke="{BLACK}" fill="{WHITE}" class="whitestone"' in item

    @pytest.mark.parametrize("token,fill", [("B", BLACK), ("W", WHITE)])
    def test_circled_stones(self, token, fill):
        item = draw(f"{token}\n", 0, 0)

        assert f'fill="{fill}"' in item
        assert f'r="5.5" stroke="{RED}" fill="none"' in item
        assert f'r="6.5" stroke="{RED}" fill="none"' in item

    @pytest.mark.parametrize("token", ["#", "@"])
    def test_squared_stones(self, token):
        item = draw(f"{token}\n", 0, 0)

        assert f'<rect x="7" y="7" width="7" height="7" stroke="{RED}" fill="none" />' in item

    @pytest.mark.parametrize("token", ["Y", "Q", "T"])
    def test_triangles(self, token):
        assert f'<polygon points="10.5,5.4' in draw(f"{token}\n", 0, 0)

    @pytest.mark.parametrize("token", ["Z", "P", "M"])
    def test_crosses(self, token):
        item = draw(f"{token}\n", 0, 0)

        assert item.count(f'stroke="{RED}" />') == 2


class TestIntersections:
    """Test board lines for empty points."""

    def test_middle_point_draws_four_half_lines(self):
        item = draw("...\n...\n...\n", 1, 1)

        assert item.count("<line") == 4
        assert f'<line x1="27.5" y1="19" x2="27.5" y2="27.5" stroke="{BLACK}" />' in item
        assert f'<line x1="27.5" y1="36" x2="27.5" y2="27.5" stroke="{BLACK}" />' in item
        assert f'<line x1="19" y1="27.5" x2="27.5" y2="27.5" stroke="{BLACK}" />' in item
        assert f'<line x1="36" y1="27.5" x2="27.5" y2="27.5" stroke="{BLACK}" />' in item

    def test_corner_draws_two_half_lines(self):
        """Test an L-junction in the top-left corner."""
        item = draw("+---\n| . .\n| . .\n", 1, 1)

        assert item.count("<line") == 2
        assert 'y1="19"' in item  # downward half-line
        assert 'x1="19"' in item  # rightward half-line

    def test_edge_draws_three_half_lines(self):
        item = draw("+----\n. . .\n. . .\n", 1, 1)

        assert item.count("<line") == 3

    def test_hoshi_is_black_dot(self):
        item = draw(",\n", 0, 0)

        assert f'<circle cx="10.5" cy="10.5" r="3" stroke="{BLACK}" fill="{BLACK}" />' in item

    @pytest.mark.parametrize("token", ["C", "S"])
    def test_markup_on_empty_point_is_red(self, token):
        item = draw(f"{token}\n", 0, 0)

        assert "<line" in item
        assert f'stroke="{RED}"' in item


class TestNumberedMoves:
    """Test move numbers and their colors."""

    def test_odd_move_black_first(self):
        item = draw("1\n", 0, 0)

        assert f'fill="{BLACK}" class="blackstone"' in item
        assert f'<text x="6.5" y="15" fill="{WHITE}" class="markup" style="font-size:14px">1</text>' in item

    def test_even_move_black_first(self):
        item = draw("2\n", 0, 0)

        assert f'fill="{WHITE}" class="whitestone"' in item
        assert f'fill="{BLACK}" class="markup"' in item

    def test_white_first_swaps_colors(self):
        item = draw("1\n", 0, 0, first_color=StoneColor.WHITE)

        assert f'fill="{WHITE}" class="whitestone"' in item
        assert f'fill="{BLACK}" class="markup"' in item

    def test_zero_is_even_and_labelled_ten(self):
        """Test that '0' is drawn as an even move with the label 10."""
        item = draw("0\n", 0, 0)

        assert f'fill="{WHITE}" class="whitestone"' in item
        assert f'<text x="2.5" y="15" fill="{BLACK}" class="markup" style="font-size:14px">10</text>' in item

    def test_two_digit_move(self):
        item = draw(". 13 .\n", 0, 1)

        assert f'fill="{BLACK}" class="blackstone"' in item
        assert ">13</text>" in item

    def test_start_move_shifts_labels(self):
        item = draw("2\n", 0, 0, start_move=67)

        assert ">68</text>" in item
        assert f'fill="{WHITE}" class="whitestone"' in item


class TestLetters:
    """Test letters on empty intersections."""

    def test_letter_hides_lines(self):
        item = draw("...\n.a.\n...\n", 1, 1)

        lines_end = item.rindex("<line")
        disc = item.index(f'stroke="{GOBAN}" fill="{GOBAN}"')
        assert disc > lines_end
        assert item.endswith(f'fill="{BLACK}" class="markup" style="font-size:14px">a</text>\n')

    def test_linked_letter_uses_link_color(self):
        item = draw("a\n", 0, 0, links={"a": "http://example.com"})

        assert f'<circle cx="10.5" cy="10.5" r="8.5" stroke="{GOBAN}" fill="{LINK}" />' in item


class TestUnknownSymbols:
    """Test cells that draw nothing."""

    @pytest.mark.parametrize("token", ["_", "&", "A"])
    def test_nothing_drawn(self, token):
        assert draw(f"{token}\n", 0, 0) == ""


class TestRender:
    """Test rendering of a whole grid."""

    def test_link_overlay_for_any_anchored_token(self):
        """Test that a stone token used as anchor gets a clickable overlay."""
        body, links = make_renderer("W.\n", links={"W": "/w"}).render()

        assert links.count('<a href="/w">') == 1
        assert 'fill-opacity="0.4"' in links
        assert '<rect x="2" y="2" width="17" height="17"' in links
        assert "whitestone" in body
        assert "<a " not in body

    def test_no_links_without_anchors(self):
        body, links = make_renderer("a.\n").render()

        assert links == ""
        assert ">a</text>" in body

    def test_borders_are_not_drawn(self):
        body, _ = make_renderer("+-+\n| . |\n+-+\n").render()

        assert "%" not in body
        # A fully enclosed point has no room for lines
        assert "<line" not in body
