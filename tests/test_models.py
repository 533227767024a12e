"""Tests for the document data models."""

import pytest

from dxfparse.models import Circle, Document, Layer, LayerTable, Line, Point, Table, Tables, Text


class TestPoint:
    """Test Point."""

    def test_2d_and_3d(self):
        """Test the dimension of a point."""
        assert not Point(1.0, 2.0).is_3d
        assert Point(1.0, 2.0, 0.0).is_3d
        assert Point(1.0, 2.0).as_tuple() == (1.0, 2.0)
        assert Point(1.0, 2.0, 3.0).as_tuple() == (1.0, 2.0, 3.0)

    def test_equality_is_tolerant(self):
        """Test that tiny float differences are equal."""
        assert Point(0.1 + 0.2, 1.0) == Point(0.3, 1.0)
        assert Point(1.0, 2.0, 3.0) != Point(1.0, 2.0, 3.1)

    def test_2d_differs_from_3d(self):
        """Test that a 2D point never equals a 3D point."""
        assert Point(1.0, 2.0) != Point(1.0, 2.0, 0.0)

    def test_other_types(self):
        """Test comparison with other types."""
        assert Point(1.0, 2.0) != (1.0, 2.0)


class TestDocument:
    """Test Document helpers."""

    def _document(self):
        return Document(
            entities=[
                Line(type="LINE", handle=0),
                Circle(type="CIRCLE", handle=1),
                Text(type="TEXT", handle=2),
                Line(type="LINE", handle=3),
            ]
        )

    def test_query_all(self):
        """Test query without types."""
        assert len(list(self._document().query())) == 4

    def test_query_by_string(self):
        """Test query with a space separated string."""
        entities = list(self._document().query("LINE text"))

        assert [entity.handle for entity in entities] == [0, 2, 3]

    def test_query_by_list(self):
        """Test query with a list of names."""
        entities = list(self._document().query(["CIRCLE"]))

        assert [entity.handle for entity in entities] == [1]

    def test_layer(self):
        """Test getting a layer by name."""
        document = Document(tables=Tables(layer=LayerTable(layers={"Walls": Layer(name="Walls")})))

        assert document.layer("Walls").name == "Walls"
        assert document.layer("Doors") is None
        assert Document().layer("Walls") is None

    def test_statistics(self):
        """Test the statistics of a document."""
        statistics = self._document().get_statistics()

        assert statistics["entities"] == {"LINE": 2, "CIRCLE": 1, "TEXT": 1}
        assert statistics["blocks"] == 0
        assert statistics["layers"] == 0

    def test_tables_record_count(self):
        """Test the record count of a table."""
        table = LayerTable()
        table.add(Layer(name="0"))
        table.add(Layer(name="1"))
        table.add(Layer(name="0"))

        assert table.record_count == 2


class TestTable:
    """Test the symbol table base."""

    def test_base_is_abstract(self):
        """Test that only the concrete tables can be created."""
        with pytest.raises(TypeError):
            Table()

    def test_layer_table(self):
        """Test adding records to a concrete table."""
        table = LayerTable(expected_count=1)

        table.add(Layer(name="0"))

        assert table.record_count == 1
        assert table.layers["0"].name == "0"
