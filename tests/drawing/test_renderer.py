"""Tests for DiagramRenderer pixel output."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor

from gomarkup.core.models import Field, ParsedDiagram, Row
from gomarkup.drawing.renderer import DiagramRenderer, RenderResult
from gomarkup.drawing.stones import StoneImages
from gomarkup.drawing.theme import DiagramTheme

BACKGROUND = DiagramTheme.default().background


@pytest.fixture(autouse=True)
def _app(qapp: object) -> None:
    return None


@pytest.fixture(scope="module")
def renderer() -> DiagramRenderer:
    return DiagramRenderer()


def _single(piece: str, **flags: bool) -> ParsedDiagram:
    row = Row(
        [Field(piece, left=flags.get("left", False), right=flags.get("right", False))],
        top=flags.get("top", False),
        bottom=flags.get("bottom", False),
    )
    return ParsedDiagram(board=[row])


def _pixel(result: RenderResult, x: int, y: int) -> QColor:
    return result.image.pixelColor(x, y)


def _is_background(color: QColor) -> bool:
    return color.rgb() == BACKGROUND.rgb()


def _is_dark(color: QColor) -> bool:
    return max(color.red(), color.green(), color.blue()) < 80


def _is_light(color: QColor) -> bool:
    return min(color.red(), color.green(), color.blue()) > 200


def _is_red(color: QColor) -> bool:
    return color.red() > 200 and color.green() < 80 and color.blue() < 80


class TestSurface:
    def test_size_without_coordinates(self, renderer: DiagramRenderer) -> None:
        board = [Row([Field(".") for _ in range(3)]) for _ in range(2)]
        result = renderer.render(ParsedDiagram(board=board))
        assert (result.width, result.height) == (88, 66)
        assert (result.image.width(), result.image.height()) == (88, 66)

    def test_size_with_coordinates(self, renderer: DiagramRenderer) -> None:
        board = [Row([Field(".") for _ in range(3)]) for _ in range(2)]
        diagram = ParsedDiagram(
            board=board, coordinates=True, left_coordinate=0, top_coordinate=18
        )
        result = renderer.render(diagram)
        assert (result.width, result.height) == (94, 72)

    def test_background(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("."))
        assert _is_background(_pixel(result, 1, 1))
        assert _is_background(_pixel(result, 42, 42))

    def test_caption_copied_only_when_non_empty(
        self, renderer: DiagramRenderer
    ) -> None:
        diagram = _single(".")
        diagram.caption = ""
        assert renderer.render(diagram).caption is None
        diagram.caption = "Black to play"
        assert renderer.render(diagram).caption == "Black to play"

    def test_deterministic(self, renderer: DiagramRenderer) -> None:
        board = [Row([Field(p) for p in "XO*1a?,W"])]
        diagram = ParsedDiagram(board=board)
        assert renderer.render(diagram).image == renderer.render(diagram).image

    def test_shared_stone_cache(self) -> None:
        stones = StoneImages()
        first = DiagramRenderer(stones=stones)
        second = DiagramRenderer(stones=stones)
        first.render(_single("X"))
        assert stones.built
        assert second.stones is stones


class TestBoardLines:
    def test_full_cross(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("."))
        for x, y in [(15, 22), (29, 22), (22, 15), (22, 29)]:
            assert _is_dark(_pixel(result, x, y))

    @pytest.mark.parametrize(
        ("flag", "cut", "kept"),
        [
            ("top", (22, 15), (22, 29)),
            ("bottom", (22, 29), (22, 15)),
            ("left", (15, 22), (29, 22)),
            ("right", (29, 22), (15, 22)),
        ],
    )
    def test_edge_stops_arm(
        self,
        renderer: DiagramRenderer,
        flag: str,
        cut: tuple[int, int],
        kept: tuple[int, int],
    ) -> None:
        result = renderer.render(_single(".", **{flag: True}))
        assert _is_background(_pixel(result, *cut))
        assert _is_dark(_pixel(result, *kept))

    def test_underscore_draws_nothing(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("_"))
        assert all(
            _is_background(_pixel(result, x, y))
            for x in range(result.width)
            for y in range(result.height)
        )


class TestPieces:
    @pytest.mark.parametrize("piece", ["O", "2", "4"])
    def test_white_stone(self, renderer: DiagramRenderer, piece: str) -> None:
        assert _is_light(_pixel(renderer.render(_single(piece)), 15, 22))

    @pytest.mark.parametrize("piece", ["X", "1", "9"])
    def test_black_stone(self, renderer: DiagramRenderer, piece: str) -> None:
        assert _is_dark(_pixel(renderer.render(_single(piece)), 15, 22))

    @pytest.mark.parametrize("piece", ["W", "B", "C"])
    def test_circle(self, renderer: DiagramRenderer, piece: str) -> None:
        result = renderer.render(_single(piece))
        assert _is_red(_pixel(result, 27, 22))
        assert not _is_red(_pixel(result, 22, 22))

    @pytest.mark.parametrize("piece", ["@", "#", "S", "Q", "Y", "T", "P", "Z", "M"])
    def test_filled_marks_cover_centre(
        self, renderer: DiagramRenderer, piece: str
    ) -> None:
        assert _is_red(_pixel(renderer.render(_single(piece)), 22, 22))

    def test_mark_drawn_over_stone(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("@"))
        assert _is_light(_pixel(result, 15, 22))
        assert _is_red(_pixel(result, 22, 22))

    def test_composite_stone(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("*"))
        assert _is_light(_pixel(result, 26, 22))
        assert _is_dark(_pixel(result, 18, 22))

    def test_number_label_drawn(self, renderer: DiagramRenderer) -> None:
        plain = renderer.render(_single("X")).image
        numbered = renderer.render(_single("1")).image
        assert plain != numbered

    def test_territory_overlay(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("?"))
        shaded = _pixel(result, 13, 13)
        assert shaded.red() > BACKGROUND.red()
        assert shaded.green() > BACKGROUND.green() + 40
        assert shaded.blue() > BACKGROUND.blue() + 60
        assert _is_background(_pixel(result, 5, 5))

    def test_star_point(self, renderer: DiagramRenderer) -> None:
        assert _is_dark(_pixel(renderer.render(_single(",")), 23, 21))
        assert _is_background(_pixel(renderer.render(_single(".")), 23, 21))

    def test_letter(self, renderer: DiagramRenderer) -> None:
        plain = renderer.render(_single("."))
        lettered = renderer.render(_single("a"))
        assert plain.image != lettered.image
        assert _is_background(_pixel(lettered, 1, 1))

    @pytest.mark.parametrize("piece", [".", "A", "%"])
    def test_unknown_piece_is_bare_point(
        self, renderer: DiagramRenderer, piece: str
    ) -> None:
        assert renderer.render(_single(piece)).image == renderer.render(
            _single("+")
        ).image


class TestCoordinates:
    def test_labels_in_margins(self, renderer: DiagramRenderer) -> None:
        board = [Row([Field(".")], top=True)]
        board[0][0].left = True
        diagram = ParsedDiagram(
            board=board, coordinates=True, left_coordinate=0, top_coordinate=18
        )
        result = renderer.render(diagram)
        top_margin = [
            _pixel(result, x, y) for x in range(22, 36) for y in range(1, 13)
        ]
        left_margin = [
            _pixel(result, x, y) for x in range(1, 17) for y in range(20, 33)
        ]
        assert any(not _is_background(c) for c in top_margin)
        assert any(not _is_background(c) for c in left_margin)

    def test_no_labels_without_flag(self, renderer: DiagramRenderer) -> None:
        result = renderer.render(_single("."))
        assert all(
            _is_background(_pixel(result, x, y))
            for x in range(0, 44)
            for y in range(0, 8)
        )


class TestExtremeCoordinates:
    @pytest.mark.parametrize("left", [2_000_000, -90])
    def test_out_of_range_column_letters(
        self, renderer: DiagramRenderer, left: int
    ) -> None:
        board = [Row([Field("."), Field(".")], bottom=True)]
        diagram = ParsedDiagram(
            board=board, coordinates=True, left_coordinate=left, top_coordinate=0
        )
        result = renderer.render(diagram)
        assert (result.width, result.height) == (72, 50)
