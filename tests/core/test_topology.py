"""Tests for BoardTopologyBuilder and the BoardGraph query surface."""

import itertools

import pytest

from junqi.core.board import BoardGraph, CellNotFoundError
from junqi.core.cell import BoardTopologyError, Cell
from junqi.core.enums import CellType, Side
from junqi.core.topology import BoardTopologyBuilder, build_board
from junqi.core.types import Coordinate, all_coordinates

C = Coordinate


class TestBuild:
    def test_one_cell_per_coordinate(self, board: BoardGraph) -> None:
        assert len(board) == 60
        assert set(board) == set(all_coordinates())
        for coord in board:
            assert board.cell_at(coord).coordinate == coord

    def test_cell_types_follow_classifier(self, board: BoardGraph) -> None:
        assert board.cell_at(C(2, 3)).cell_type == CellType.CAMP
        assert board.cell_at(C(3, 11)).cell_type == CellType.HQ
        assert board.cell_at(C(0, 7)).cell_type == CellType.RAILROAD
        assert board.cell_at(C(2, 0)).cell_type == CellType.NORMAL

    def test_edge_count(self, board: BoardGraph) -> None:
        # 48 horizontal + 53 vertical (two mountain columns blocked) + 32 diagonal.
        assert len(board.edges()) == 133

    def test_connected(self, board: BoardGraph) -> None:
        assert board.is_connected()

    def test_rebuild_is_structurally_identical(self) -> None:
        first = build_board()
        second = BoardTopologyBuilder().build()
        assert first is not second
        assert first == second
        assert set(first.edges()) == set(second.edges())

    def test_builder_reusable(self) -> None:
        builder = BoardTopologyBuilder()
        assert builder.build() == builder.build()


class TestAdjacencyInvariants:
    def test_symmetry(self, board: BoardGraph) -> None:
        for a, b in itertools.product(board, repeat=2):
            assert (b in board.neighbors_of(a)) == (a in board.neighbors_of(b))

    def test_no_self_loops(self, board: BoardGraph) -> None:
        for coord in board:
            assert coord not in board.neighbors_of(coord)

    def test_no_duplicate_neighbors(self, board: BoardGraph) -> None:
        for cell in board.cells():
            coords = [n.coordinate for n in cell.neighbors]
            assert len(coords) == len(set(coords))

    def test_edges_are_unit_steps(self, board: BoardGraph) -> None:
        for a, b in board.edges():
            assert max(abs(a.col - b.col), abs(a.row - b.row)) == 1

    def test_diagonal_edges_touch_a_camp(self, board: BoardGraph) -> None:
        for a, b in board.edges():
            if a.col != b.col and a.row != b.row:
                types = {board.cell_at(a).cell_type, board.cell_at(b).cell_type}
                assert CellType.CAMP in types

    def test_edges_listed_once_in_order(self, board: BoardGraph) -> None:
        edges = board.edges()
        assert len(edges) == len(set(edges))
        assert all(a < b for a, b in edges)


class TestMountainRange:
    @pytest.mark.parametrize("col", [1, 3])
    def test_blocked_columns(self, board: BoardGraph, col: int) -> None:
        assert not board.are_adjacent(C(col, 5), C(col, 6))
        assert not board.are_adjacent(C(col, 6), C(col, 5))

    @pytest.mark.parametrize("col", [0, 2, 4])
    def test_open_columns(self, board: BoardGraph, col: int) -> None:
        assert board.are_adjacent(C(col, 5), C(col, 6))
        assert board.are_adjacent(C(col, 6), C(col, 5))

    def test_no_diagonal_across_mountain(self, board: BoardGraph) -> None:
        assert not board.are_adjacent(C(0, 5), C(1, 6))
        assert not board.are_adjacent(C(2, 5), C(1, 6))


class TestCampDiagonals:
    def test_center_camp_links_to_other_camps(self, board: BoardGraph) -> None:
        for corner in (C(1, 2), C(3, 2), C(1, 4), C(3, 4)):
            assert board.are_adjacent(C(2, 3), corner)

    def test_center_camp_neighbors(self, board: BoardGraph) -> None:
        assert board.neighbors_of(C(2, 3)) == {
            C(2, 2), C(2, 4), C(1, 3), C(3, 3),
            C(1, 2), C(3, 2), C(1, 4), C(3, 4),
        }

    def test_camp_links_to_railroad_diagonally(self, board: BoardGraph) -> None:
        assert board.are_adjacent(C(1, 2), C(0, 1))
        assert board.are_adjacent(C(3, 9), C(4, 10))

    def test_non_camp_diagonal_absent(self, board: BoardGraph) -> None:
        assert not board.are_adjacent(C(0, 0), C(1, 1))
        assert not board.are_adjacent(C(1, 1), C(2, 2))

    def test_every_camp_has_eight_neighbors(self, board: BoardGraph) -> None:
        for coord in board.coordinates_of_type(CellType.CAMP):
            assert len(board.neighbors_of(coord)) == 8

    def test_corner_neighbors(self, board: BoardGraph) -> None:
        assert board.neighbors_of(C(0, 0)) == {C(1, 0), C(0, 1)}


class TestQueries:
    @pytest.mark.parametrize("coord", [C(5, 0), C(0, 12), C(-1, 3), C(2, -1)])
    def test_cell_at_off_board(self, board: BoardGraph, coord: Coordinate) -> None:
        with pytest.raises(CellNotFoundError):
            board.cell_at(coord)

    def test_not_found_is_lookup_error(self, board: BoardGraph) -> None:
        with pytest.raises(LookupError, match="No cell"):
            board[C(9, 9)]

    def test_neighbors_of_off_board(self, board: BoardGraph) -> None:
        with pytest.raises(CellNotFoundError):
            board.neighbors_of(C(7, 7))

    def test_neighbors_view_is_immutable(self, board: BoardGraph) -> None:
        neighbors = board.neighbors_of(C(2, 3))
        assert isinstance(neighbors, frozenset)

    def test_contains(self, board: BoardGraph) -> None:
        assert C(4, 11) in board
        assert C(5, 11) not in board
        assert [1, 2] not in board

    def test_plain_tuple_lookup(self, board: BoardGraph) -> None:
        assert board.cell_at((2, 3)).is_camp  # type: ignore[arg-type]

    def test_coordinates_of_type(self, board: BoardGraph) -> None:
        hqs = [C(1, 0), C(3, 0), C(1, 11), C(3, 11)]
        assert board.coordinates_of_type(CellType.HQ) == hqs

    def test_cell_side_follows_home_half(self, board: BoardGraph) -> None:
        blue = [c for c in board if board[c].side == Side.BLUE]
        assert len(blue) == 30
        assert all(c.row <= 5 for c in blue)
        assert board[C(1, 11)].side == Side.RED

    def test_empty_neighbor_set_is_valid(self) -> None:
        lonely = BoardGraph([Cell(C(0, 0), CellType.NORMAL)])
        assert lonely.neighbors_of(C(0, 0)) == frozenset()

    def test_repr_shows_layout(self, board: BoardGraph) -> None:
        text = repr(board)
        lines = text.splitlines()
        assert lines[0] == " 0 R H . H R"
        assert lines[6] == "   | ^ | ^ |"
        assert "C" in text
        assert lines[-1] == "   0 1 2 3 4"


class TestSealing:
    def test_cells_rejected_after_build(self, board: BoardGraph) -> None:
        a = board.cell_at(C(0, 0))
        b = board.cell_at(C(4, 11))
        with pytest.raises(BoardTopologyError, match="sealed"):
            a.link(b)
        assert not a.is_neighbor(b)

    def test_link_is_idempotent_and_symmetric(self) -> None:
        a = Cell(C(0, 0), CellType.RAILROAD)
        b = Cell(C(1, 0), CellType.HQ)
        assert a.link(b)
        assert not a.link(b)
        assert not b.link(a)
        assert a.neighbors == (b,)
        assert b.neighbors == (a,)

    def test_self_link_ignored(self) -> None:
        a = Cell(C(2, 2), CellType.NORMAL)
        assert not a.link(a)
        assert a.neighbors == ()


class _NoEdgesBuilder(BoardTopologyBuilder):
    def _connect(self) -> None:
        pass


class _ExtraDiagonalBuilder(BoardTopologyBuilder):
    def _connect(self) -> None:
        super()._connect()
        self._cells[C(0, 0)].link(self._cells[C(1, 1)])


class _TunnelBuilder(BoardTopologyBuilder):
    def _connect(self) -> None:
        super()._connect()
        self._cells[C(1, 5)].link(self._cells[C(1, 6)])


class TestVerification:
    def test_missing_mountain_pass_fails(self) -> None:
        with pytest.raises(BoardTopologyError, match="Mountain pass missing"):
            _NoEdgesBuilder().build()

    def test_diagonal_without_camp_fails(self) -> None:
        with pytest.raises(BoardTopologyError, match="no camp endpoint"):
            _ExtraDiagonalBuilder().build()

    def test_blocked_column_crossing_fails(self) -> None:
        with pytest.raises(BoardTopologyError, match="unexpected in column 1"):
            _TunnelBuilder().build()
