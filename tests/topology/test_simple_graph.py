"""Tests for simple-graph enforcement on lines."""

import pytest

from regua.errors import DuplicateEdgeError, SelfLoopError


class TestSelfLoops:
    def test_self_loop_rejected(self, line):
        kennington = line.new_station("Kennington")

        with pytest.raises(SelfLoopError) as excinfo:
            line.new_edge(kennington, kennington)

        assert excinfo.value.node is kennington
        assert line.edges == ()

    def test_self_loop_is_a_value_error(self, line):
        node = line.new_node()

        with pytest.raises(ValueError):
            line.new_edge(node, node)


class TestDuplicateEdges:
    def test_same_direction_rejected(self, line):
        a = line.new_station()
        b = line.new_station()
        existing = line.new_edge(a, b)

        with pytest.raises(DuplicateEdgeError) as excinfo:
            line.new_edge(a, b)

        assert excinfo.value.existing is existing

    def test_reverse_direction_rejected(self, line):
        waterloo = line.new_station("Waterloo")
        kennington = line.new_station("Kennington")
        line.new_edge(waterloo, kennington)

        with pytest.raises(DuplicateEdgeError):
            line.new_edge(kennington, waterloo)

        assert len(line.edges) == 1

    def test_same_pair_on_different_lines(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = red.new_station()
        b = red.new_station()
        blue.add_node(a)
        blue.add_node(b)

        red_edge = red.new_edge(a, b)
        blue_edge = blue.new_edge(b, a)

        assert red_edge is not blue_edge
        assert a.edges == (red_edge, blue_edge)

    def test_add_edge_enforces_simple_graph(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = red.new_station()
        b = red.new_station()
        red_edge = red.new_edge(a, b)
        blue.new_edge(a, b)

        with pytest.raises(DuplicateEdgeError):
            blue.add_edge(red_edge)

        assert red_edge.lines == (red,)

    def test_pair_free_again_after_removal(self, line):
        a = line.new_station()
        b = line.new_station()
        line.remove_edge(line.new_edge(a, b))

        replacement = line.new_edge(b, a)

        assert line.edges == (replacement,)

    def test_rejected_edge_leaves_line_untouched(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = red.new_station()
        b = red.new_station()
        blue.new_edge(a, b)
        next_id = project.next_id

        with pytest.raises(DuplicateEdgeError):
            blue.new_edge(b, a)

        assert project.next_id == next_id
        assert len(blue.edges) == 1
        assert a.lines == (red, blue)
