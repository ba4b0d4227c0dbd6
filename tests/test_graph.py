"""Unit tests for the proximity graph builder."""

import math

import pytest

from parkpath.domain.distance import haversine_km
from parkpath.domain.graph import (
    build_proximity_graph,
    connected_components,
    isolated_nodes,
    to_networkx,
)

from tests.conftest import CAMPUS_SOURCE, FAR_LOT, NEAR_LOT, REMOTE_A, REMOTE_B

SOURCE = {"coordinates": CAMPUS_SOURCE}


def _edge_set(graph):
    return {
        (min(a, e.to), max(a, e.to), round(e.weight, 9))
        for a, node in graph.items()
        for e in node.edges
    }


class TestPairwisePass:
    def test_one_node_per_location(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, FAR_LOT])
        assert sorted(graph) == [0, 1, 2]

    def test_close_points_fully_connected(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, FAR_LOT])
        assert {e.to for e in graph[0].edges} == {1, 2}
        assert {e.to for e in graph[1].edges} == {0, 2}

    def test_edges_are_symmetric(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, FAR_LOT])
        for a, node in graph.items():
            for edge in node.edges:
                back = [e for e in graph[edge.to].edges if e.to == a]
                assert back and back[0].weight == edge.weight

    def test_weight_is_haversine(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT])
        expected = haversine_km(*CAMPUS_SOURCE, *NEAR_LOT["coordinates"])
        assert graph[0].edges[0].weight == expected

    def test_threshold_is_inclusive(self):
        d = haversine_km(*CAMPUS_SOURCE, *FAR_LOT["coordinates"])
        graph = build_proximity_graph([SOURCE, FAR_LOT], max_edge_km=d)
        assert len(graph[0].edges) == 1

    def test_empty_and_single(self):
        assert build_proximity_graph([]) == {}
        graph = build_proximity_graph([SOURCE])
        assert graph[0].edges == []


class TestIsolationPass:
    def test_far_node_joined_to_nearest(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, REMOTE_A])
        assert isolated_nodes(graph) == []
        # NEAR_LOT sits slightly west of the source, so the source is nearer
        assert [e.to for e in graph[2].edges] == [0]

    def test_mutually_nearest_pair_gets_one_edge(self):
        # every node starts isolated; A and B both pick each other
        graph = build_proximity_graph([SOURCE, REMOTE_A, REMOTE_B])
        assert [e.to for e in graph[1].edges] == [0, 2]
        assert [e.to for e in graph[2].edges] == [1]

    def test_no_isolated_nodes(self):
        locations = [SOURCE, NEAR_LOT, FAR_LOT, REMOTE_A, REMOTE_B]
        graph = build_proximity_graph(locations, max_edge_km=0.01)
        assert isolated_nodes(graph) == []

    def test_result_independent_of_input_order(self):
        locations = [SOURCE, NEAR_LOT, FAR_LOT, REMOTE_A, REMOTE_B]
        forward = build_proximity_graph(locations, max_edge_km=0.01)
        order = [0, 4, 3, 2, 1]
        backward = build_proximity_graph([locations[i] for i in order], max_edge_km=0.01)
        relabel = {
            (min(order[a], order[b]), max(order[a], order[b]), w)
            for a, b, w in _edge_set(backward)
        }
        assert relabel == _edge_set(forward)

    def test_remote_pair_stays_disconnected_by_default(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, REMOTE_A, REMOTE_B])
        assert connected_components(graph) == [{0, 1}, {2, 3}]


class TestNetworkxView:
    def test_edges_and_weights_carried_over(self):
        graph = build_proximity_graph([SOURCE, NEAR_LOT, FAR_LOT])
        g = to_networkx(graph)
        assert sorted(g.nodes) == [0, 1, 2]
        assert g.number_of_edges() == 3
        assert g[0][1]["weight"] == graph[0].edges[0].weight

    def test_isolated_nodes_kept(self):
        g = to_networkx(build_proximity_graph([SOURCE]))
        assert list(g.nodes) == [0]
        assert g.number_of_edges() == 0

    def test_components_sorted_by_lowest_key(self):
        graph = build_proximity_graph([SOURCE, REMOTE_A, NEAR_LOT, REMOTE_B])
        assert connected_components(graph) == [{0, 2}, {1, 3}]

    def test_components_of_empty_graph(self):
        assert connected_components({}) == []


class TestComponentCompletion:
    def test_completion_joins_everything(self):
        graph = build_proximity_graph(
            [SOURCE, NEAR_LOT, REMOTE_A, REMOTE_B], complete_components=True
        )
        assert connected_components(graph) == [{0, 1, 2, 3}]

    def test_completion_uses_shortest_crossing_edge(self):
        graph = build_proximity_graph(
            [SOURCE, NEAR_LOT, REMOTE_A, REMOTE_B], complete_components=True
        )
        crossing = [e for e in graph[2].edges if e.to in (0, 1)]
        assert len(crossing) == 1
        best = min(
            haversine_km(*REMOTE_A["coordinates"], *SOURCE["coordinates"]),
            haversine_km(*REMOTE_A["coordinates"], *NEAR_LOT["coordinates"]),
        )
        assert crossing[0].weight == pytest.approx(best)

    def test_nan_node_left_alone(self):
        broken = {"coordinates": ["x", "y"]}
        graph = build_proximity_graph([SOURCE, NEAR_LOT, broken], complete_components=True)
        assert graph[2].edges == []
        assert all(math.isfinite(e.weight) for e in graph[0].edges)
