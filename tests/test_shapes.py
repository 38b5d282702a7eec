import pytest

from tetris_errors import ConfigError
from tetris_shapes import JLOSTZ_KICKS, Pivot, ShapeCatalog, TetrominoShape


def bar(kind="V", kicks=JLOSTZ_KICKS):
    return TetrominoShape.build(kind, [(0, 0), (0, 1), (0, 2), (0, 3)], Pivot.INTEGER, kicks)


def test_standard_catalog_has_seven_kinds():
    catalog = ShapeCatalog.standard()
    assert sorted(catalog.kinds) == ["I", "J", "L", "O", "S", "T", "Z"]
    assert len(catalog) == 7
    assert "T" in catalog and "X" not in catalog


def test_pivot_styles():
    catalog = ShapeCatalog.standard()
    assert catalog["I"].pivot is Pivot.HALF_OFFSET
    assert catalog["O"].pivot is Pivot.HALF_OFFSET
    for kind in "JLSTZ":
        assert catalog[kind].pivot is Pivot.INTEGER


def test_kick_tables_are_consistent():
    for shape in ShapeCatalog.standard():
        assert shape.kick_shape == (8, 5)
        assert all(row[0] == (0, 0) for row in shape.kicks)


def test_empty_catalog_rejected():
    with pytest.raises(ConfigError):
        ShapeCatalog([])


def test_wrong_cell_count_rejected():
    shape = TetrominoShape.build("X", [(0, 0), (1, 0), (2, 0)], Pivot.INTEGER, JLOSTZ_KICKS)
    with pytest.raises(ConfigError):
        ShapeCatalog([shape])


def test_overlapping_cells_rejected():
    shape = TetrominoShape.build("X", [(0, 0), (0, 0), (1, 0), (2, 0)], Pivot.INTEGER, JLOSTZ_KICKS)
    with pytest.raises(ConfigError):
        ShapeCatalog([shape])


def test_duplicate_kind_rejected():
    with pytest.raises(ConfigError):
        ShapeCatalog([bar(), bar()])


def test_ragged_kick_table_rejected():
    kicks = [list(row) for row in JLOSTZ_KICKS]
    kicks[3] = kicks[3][:2]
    with pytest.raises(ConfigError):
        ShapeCatalog([bar(kicks=kicks)])


def test_kick_tables_must_match_across_kinds():
    short = [row[:3] for row in JLOSTZ_KICKS]
    with pytest.raises(ConfigError):
        ShapeCatalog([bar("A"), bar("B", kicks=short)])
