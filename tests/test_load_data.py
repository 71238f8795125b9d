import networkx as nx
import pytest

from exceptions import GraphConfigurationError
from load_data import default_network, from_networkx, load_graph, to_networkx
from max_flow import compute_max_flow


def _write(tmp_path, nodes, edges):
    nodes_file = tmp_path / "nodes.csv"
    edges_file = tmp_path / "edges.csv"
    nodes_file.write_text(nodes)
    edges_file.write_text(edges)
    return str(nodes_file), str(edges_file)


def test_default_network_shape():
    g = default_network()
    assert [n.id for n in g.nodes] == ["s", "v1", "v2", "v3", "v4", "t"]
    assert [e.id for e in g.edges] == [f"e{i}" for i in range(1, 10)]
    assert sum(e.capacity for e in g.edges) == 69
    g.validate_terminals()


def test_load_graph_from_csv(tmp_path):
    nodes, edges = _write(
        tmp_path,
        "id,role\ns,source\na,\nt,sink\n",
        "id,from,to,capacity,flow\ne1,s,a,4,1\ne2,a,t,3,\ne3,s,t,2.5,0\n",
    )
    g = load_graph(nodes, edges)
    assert g.source().id == "s"
    assert g.sink().id == "t"
    assert [(e.id, e.u, e.v, e.capacity, e.flow) for e in g.edges] == [
        ("e1", "s", "a", 4, 1),
        ("e2", "a", "t", 3, 0),
        ("e3", "s", "t", 2.5, 0),
    ]
    assert compute_max_flow(g) == 5.5


def test_load_graph_skips_invalid_rows(tmp_path, caplog):
    nodes, edges = _write(
        tmp_path,
        "id,role\ns,source\nt,sink\n",
        "id,from,to,capacity\ne1,s,t,abc\ne2,s,t,-3\ne3,s,t,6\n",
    )
    with caplog.at_level("WARNING"):
        g = load_graph(nodes, edges)
    assert [e.id for e in g.edges] == ["e3"]
    assert "Skipping invalid edge row" in caplog.text


def test_load_graph_custom_columns(tmp_path):
    nodes, edges = _write(
        tmp_path,
        "name,kind\n1,source\n2,sink\n",
        "key,src,dst,cap\nx,1,2,7\n",
    )
    g = load_graph(
        nodes, edges,
        id_colname="name", role_colname="kind",
        edge_id_colname="key", from_colname="src", to_colname="dst", cap_colname="cap",
    )
    assert g.source().id == "1"
    assert g.edges[0].capacity == 7


def test_load_graph_errors(tmp_path):
    nodes, edges = _write(tmp_path, "id,role\ns,source\n", "id,from,to\ne1,s,s\n")
    with pytest.raises(GraphConfigurationError):
        load_graph(nodes, edges)

    nodes, edges = _write(tmp_path, "id,role\ns,source\n", "id,from,to,capacity\ne1,s,x,1\n")
    with pytest.raises(GraphConfigurationError):
        load_graph(nodes, edges)

    nodes, edges = _write(tmp_path, "id,role\ns,source\nt,source\n", "id,from,to,capacity\n")
    with pytest.raises(GraphConfigurationError):
        load_graph(nodes, edges)


def test_networkx_round_trip(network):
    G = to_networkx(network)
    assert G["v2"]["v4"]["capacity"] == 9
    assert nx.maximum_flow_value(G, "s", "t") == 19
    g = from_networkx(G, "s", "t")
    assert g.source().id == "s"
    assert compute_max_flow(g) == 19


def test_from_networkx_requires_capacity():
    G = nx.DiGraph()
    G.add_edge("s", "t")
    with pytest.raises(GraphConfigurationError):
        from_networkx(G, "s", "t")
