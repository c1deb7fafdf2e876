"""Tests for nodes, stations and edges."""

import networkx as nx
import pytest

from regua.errors import (
    DuplicateMembership,
    InvalidArgument,
    NotAdjacent,
    NotFound,
    TypeMismatch,
)
from regua.topology import Category, Edge, Kind, Node, Project, Station


class TestNode:
    def test_new_node(self, line):
        unnamed = line.new_node()
        named = line.new_node("My Node")

        assert unnamed.name is None
        assert named.name == "My Node"
        assert named.source is line.project
        assert named.project is line.project
        assert named.edges == ()
        assert named.lines == (line,)
        assert named.category is Category.ELEMENT
        assert (unnamed.id, named.id) == (3, 4)
        assert line.nodes == (unnamed, named)

    def test_node_requires_project_source(self, line):
        with pytest.raises(TypeMismatch):
            Node(line)

    def test_node_name_can_be_cleared(self, line):
        node = line.new_node("Junction")
        node.name = None

        assert node.name is None

    def test_node_name_must_be_string(self, line):
        node = line.new_node()

        with pytest.raises(InvalidArgument):
            node.name = 12


class TestStation:
    def test_new_station(self, line):
        unnamed = line.new_station()
        named = line.new_station("My Station")

        assert unnamed.name == "Station 1"
        assert named.name == "My Station"
        assert named.source is line.project
        assert named.edges == ()
        assert isinstance(named, Node)
        assert named.kind is Kind.STATION
        assert (unnamed.id, named.id) == (3, 4)

    def test_station_name_cannot_be_cleared(self, line):
        station = line.new_station("Kennington")

        with pytest.raises(InvalidArgument):
            station.name = ""

        assert station.name == "Kennington"

    def test_station_created_directly(self, project):
        station = Station(project)

        assert station.name == "Station 1"
        assert station.lines == ()


class TestEdge:
    def test_new_edge(self, line):
        a = line.new_station()
        b = line.new_station()
        unnamed = line.new_edge(a, b)
        c = line.new_station()
        named = line.new_edge(a, c, "My Edge")

        assert unnamed.name is None
        assert named.name == "My Edge"
        assert named.source is line.project
        assert named.head_node is a
        assert named.tail_node is c
        assert named.ends == (a, c)
        assert (unnamed.id, named.id) == (5, 7)
        assert line.edges == (unnamed, named)

    def test_traverse(self, line):
        a = line.new_station()
        b = line.new_station()
        edge = line.new_edge(a, b)

        assert edge.traverse(a) is b
        assert edge.traverse(b) is a
        assert edge.connect(a) is b

    def test_traverse_from_other_node(self, line):
        a = line.new_station()
        b = line.new_station()
        edge = line.new_edge(a, b)
        other = line.new_node()

        with pytest.raises(NotAdjacent) as excinfo:
            edge.traverse(other)

        assert excinfo.value.node is other
        assert excinfo.value.edge is edge

    def test_edge_ends_must_be_nodes(self, line):
        a = line.new_station()

        with pytest.raises(TypeMismatch):
            line.new_edge(a, line)
        with pytest.raises(TypeMismatch):
            line.new_edge("a", a)

    def test_edge_between_projects_rejected(self, line, settings):
        a = line.new_station()
        foreign = Project(settings=settings).new_system().new_line().new_station()

        with pytest.raises(InvalidArgument):
            line.new_edge(a, foreign)

        assert line.edges == ()

    def test_edge_ends_join_line(self, project):
        red = project.new_system().new_line("Red")
        blue = project.new_system().new_line("Blue")
        a = red.new_station("A")
        b = red.new_station("B")

        edge = blue.new_edge(a, b)

        assert blue.nodes == (a, b)
        assert a.lines == (red, blue)
        assert edge.lines == (blue,)


class TestLineMembership:
    def test_add_node_to_second_line(self, project):
        nline = project.new_system("MUNI").new_line("N Judah")
        blue = project.new_system("BART").new_line("Blue Line")
        embarcadero = nline.new_station("Embarcadero")

        blue.add_node(embarcadero)

        assert embarcadero in blue.nodes
        assert embarcadero in nline.nodes
        assert embarcadero.lines == (nline, blue)

    def test_add_node_twice(self, line):
        node = line.new_node()

        with pytest.raises(DuplicateMembership):
            line.add_node(node)

    def test_add_node_rejects_edge(self, line):
        edge = line.new_edge(line.new_node(), line.new_node())

        with pytest.raises(TypeMismatch):
            line.add_node(edge)

    def test_add_edge_to_second_line(self, project):
        nline = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = nline.new_station()
        b = nline.new_station()
        edge = nline.new_edge(a, b, "Market Street Subway")

        blue.add_edge(edge)

        assert edge in blue.edges
        assert edge not in blue.nodes
        assert edge.lines == (nline, blue)
        assert blue.edge_between(b, a) is edge

    def test_add_edge_twice(self, line):
        edge = line.new_edge(line.new_node(), line.new_node())

        with pytest.raises(DuplicateMembership):
            line.add_edge(edge)

    def test_add_edge_rejects_node(self, line):
        with pytest.raises(TypeMismatch):
            line.add_edge(line.new_node())

    def test_remove_edge_keeps_ends(self, line):
        a = line.new_node()
        b = line.new_node()
        edge = line.new_edge(a, b)

        line.remove_edge(edge)

        assert line.edges == ()
        assert line.nodes == (a, b)
        assert edge.lines == ()

    def test_remove_absent_edge(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        edge = red.new_edge(red.new_node(), red.new_node())

        with pytest.raises(NotFound):
            blue.remove_edge(edge)

    def test_remove_absent_node(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        node = red.new_node()

        with pytest.raises(NotFound):
            blue.remove_node(node)

    def test_remove_node_detaches_its_edges(self, line):
        a = line.new_station()
        b = line.new_station()
        c = line.new_station()
        ab = line.new_edge(a, b)
        bc = line.new_edge(b, c)

        line.remove_node(b)

        assert line.nodes == (a, c)
        assert line.edges == ()
        assert ab.lines == () and bc.lines == ()
        assert b.lines == ()

    def test_remove_node_only_affects_one_line(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = red.new_station()
        b = red.new_station()
        edge = red.new_edge(a, b)
        blue.add_edge(edge)

        blue.remove_node(a)

        assert red.edges == (edge,)
        assert edge.lines == (red,)
        assert a.lines == (red,)


class TestIncidentEdges:
    def test_node_edges_tracks_attached_edges(self, line):
        a = line.new_station()
        b = line.new_station()
        c = line.new_station()
        ab = line.new_edge(a, b)
        ac = line.new_edge(a, c)

        assert a.edges == (ab, ac)
        assert b.edges == (ab,)
        assert a.degree == 2

    def test_node_edges_kept_while_any_line_uses_edge(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        a = red.new_station()
        b = red.new_station()
        edge = red.new_edge(a, b)
        blue.add_edge(edge)

        red.remove_edge(edge)
        assert a.edges == (edge,)

        blue.remove_edge(edge)
        assert a.edges == ()

    def test_re_adding_edge_restores_incidence(self, line):
        a = line.new_node()
        b = line.new_node()
        edge = line.new_edge(a, b)
        line.remove_edge(edge)

        line.add_edge(edge)

        assert a.edges == (edge,)
        assert b.edges == (edge,)

    def test_line_incident_edges(self, line):
        a = line.new_node()
        b = line.new_node()
        c = line.new_node()
        ab = line.new_edge(a, b)
        bc = line.new_edge(b, c)

        assert set(line.incident_edges(b)) == {ab, bc}
        assert line.incident_edges(a) == [ab]

    def test_incident_edges_of_non_member(self, project):
        red = project.new_system().new_line()
        blue = project.new_system().new_line()
        node = red.new_node()

        with pytest.raises(NotFound):
            blue.incident_edges(node)


class TestLineGraphView:
    def test_graph_mirrors_membership(self, line):
        a = line.new_station()
        b = line.new_station()
        edge = line.new_edge(a, b)

        graph = line.graph

        assert set(graph.nodes) == {a, b}
        assert graph.edges[a, b]["edge"] is edge

    def test_graph_view_is_read_only(self, line):
        graph = line.graph

        with pytest.raises(nx.NetworkXError):
            graph.add_node("intruder")

        assert line.nodes == ()

    def test_edge_between(self, line):
        a = line.new_node()
        b = line.new_node()
        c = line.new_node()
        edge = line.new_edge(a, b)

        assert line.edge_between(a, b) is edge
        assert line.edge_between(b, a) is edge
        assert line.edge_between(a, c) is None
