"""End-to-end tests for the GoDiagram façade."""

import xml.etree.ElementTree as ET

import pytest

from diagram.cells import StoneColor
from diagram.config import FontMetrics
from diagram.go_diagram import GoDiagram

SVG_NS = "{http://www.w3.org/2000/svg}"

CORNER = """$$Bc Corner problem
$$ +-----------
$$ | . . . . .
$$ | . , 1 2 .
$$ | . X O a .
$$ | . . . . .
$$ [a|http://example.com/a]"""


class TestParsing:
    """Test the state computed at construction."""

    def test_header_fields(self):
        diagram = GoDiagram("$$Wc9 Title\n$$ +---\n$$ | . .")

        assert diagram.valid
        assert diagram.first_color is StoneColor.WHITE
        assert diagram.board_size == 9
        assert diagram.coordinates

    def test_enclosed_point_with_coordinates(self):
        """Test a 1x1 board with all borders and coordinates requested."""
        diagram = GoDiagram("$$Bc\n$$ +-+\n$$ | . |\n$$ +-+")

        assert diagram.valid
        assert diagram.coordinates
        assert diagram.image_width == 17 * 1 + 4 + (2 * 8 + 4)
        assert diagram.image_height == 17 * 1 + 4 + (16 + 2)

    def test_coordinates_forced_off_without_vertical_border(self):
        diagram = GoDiagram("$$c\n$$ -----\n$$ . . .")

        assert diagram.valid
        assert not diagram.coordinates
        assert diagram.image_width == 17 * 3 + 4

    def test_custom_font(self):
        diagram = GoDiagram("$$\n$$ . .", font=FontMetrics(h=20, w=10))

        assert diagram.image_width == 22 * 2 + 4
        assert diagram.image_height == 22 + 4

    def test_title_is_escaped(self):
        diagram = GoDiagram("$$ Tom & Jerry's <game>\n$$ . .")

        assert diagram.get_title() == "Tom &amp; Jerry&#x27;s &lt;game&gt;"

    def test_leading_blank_lines_are_skipped(self):
        diagram = GoDiagram("\n  \n$$B Title\n$$ . X")

        assert diagram.valid
        assert diagram.get_title() == "Title"

    def test_link_map(self):
        diagram = GoDiagram(CORNER)

        assert diagram.get_linkmap() == {"a": "http://example.com/a"}

    def test_link_map_is_a_copy(self):
        diagram = GoDiagram(CORNER)
        diagram.get_linkmap()["b"] = "changed"

        assert "b" not in diagram.get_linkmap()

    def test_invalid_anchor_is_dropped(self):
        diagram = GoDiagram("$$\n$$ [X|http://x]\n$$ [W|http://w]\n$$ . X W")

        assert diagram.get_linkmap() == {"W": "http://w"}


class TestFailures:
    """Test the permanent invalid state."""

    @pytest.mark.parametrize("text", [
        "",
        "Bc\n$$ . . .",
        " . . .\n$$ . . .",
    ])
    def test_malformed_header(self, text):
        """Test that a first line without '$$' gives the error image."""
        diagram = GoDiagram(text)
        output = diagram.create_svg()

        assert not diagram.valid
        assert output.width is None
        assert output.height is None
        assert output.failed
        assert "Parsing of ASCII diagram failed" in output.xml

    def test_malformed_header_skips_links(self):
        diagram = GoDiagram("Title\n$$ [a|url]\n$$ . a")

        assert diagram.get_linkmap() == {}

    @pytest.mark.parametrize("text", [
        "$$ Only a title",
        "$$\n$$ +---+\n$$ +---+",
        "$$\n$$ |\n$$ |",
    ])
    def test_degenerate_grid(self, text):
        diagram = GoDiagram(text)

        assert not diagram.valid
        assert diagram.image_width is None
        assert diagram.image_height is None
        assert diagram.create_svg().failed

    def test_error_does_not_echo_input(self):
        output = GoDiagram("<script>secret</script>").create_svg()

        assert "secret" not in output.xml

    def test_error_image_is_well_formed(self):
        output = GoDiagram("broken").create_svg()
        root = ET.fromstring(output.xml)

        assert root.tag == f"{SVG_NS}svg"
        assert root.find(f"{SVG_NS}g/{SVG_NS}rect").get("height") == "50"

    def test_error_is_permanent(self):
        diagram = GoDiagram("broken")

        assert diagram.create_svg() == diagram.create_svg()


class TestCreateSvg:
    """Test the rendered SVG document."""

    def test_document_size(self):
        diagram = GoDiagram(CORNER)
        output = diagram.create_svg()
        root = ET.fromstring(output.xml)

        assert (output.width, output.height) == (diagram.image_width, diagram.image_height)
        assert root.get("width") == str(output.width)
        assert root.get("height") == str(output.height)
        assert root.get("viewBox") == f"0 0 {output.width} {output.height}"
        assert root.find(f"{SVG_NS}title").text == "Corner problem"

    def test_render_is_idempotent(self):
        diagram = GoDiagram(CORNER)

        assert diagram.create_svg().xml == diagram.create_svg().xml

    def test_sections_order(self):
        """Test background, then links, then stones, then coordinates."""
        xml = GoDiagram(CORNER).create_svg().xml

        background = xml.index('class="goban"')
        link = xml.index('<a href="http://example.com/a">')
        stone = xml.index('class="blackstone"')
        coordinate = xml.index('class="coordClass"')
        assert background < link < stone < coordinate

    def test_linked_letter_gets_overlay(self):
        output = GoDiagram("$$\n$$ [a|http://example.com]\n$$ . a .").create_svg()

        assert output.xml.count('<a href="http://example.com">') == 1
        assert ">a</text>" in output.xml

    def test_two_digit_move_in_non_compact_row(self):
        xml = GoDiagram("$$\n$$ . 12 .").create_svg().xml

        assert ">12</text>" in xml
        assert ">1</text>" not in xml
        assert ">2</text>" not in xml

    def test_zero_displayed_as_ten(self):
        xml = GoDiagram("$$\n$$ . 0 .").create_svg().xml

        assert ">10</text>" in xml
        assert 'class="whitestone"' in xml

    def test_start_move(self):
        xml = GoDiagram("$$m101\n$$ 1 2").create_svg().xml

        assert ">101</text>" in xml
        assert ">102</text>" in xml

    def test_url_is_escaped(self):
        xml = GoDiagram('$$\n$$ [a|/page?x=1&y="2"]\n$$ a').create_svg().xml

        assert 'href="/page?x=1&amp;y=&quot;2&quot;"' in xml

    def test_document_parses_as_xml(self):
        root = ET.fromstring(GoDiagram(CORNER).create_svg().xml)

        circles = root.findall(f"{SVG_NS}circle")
        assert len(circles) >= 4


class TestCreateSgf:
    """Test the SGF export placeholder."""

    def test_export_is_reported_unimplemented(self):
        result = GoDiagram(CORNER).create_sgf()

        assert result.format == "sgf"
        assert not result.implemented
        assert result.content == ""
