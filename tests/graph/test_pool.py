import pytest

from poolgraph import Graph, GraphConfig, WeakNode


def test_init_empty_graph():
    """A new graph has an empty pool."""
    g = Graph()
    assert len(g) == 0
    assert g.is_empty()
    assert repr(g) == "Graph(nodes=0, edges=0)"


def test_insert_indices_strictly_increasing():
    g = Graph()
    indices = [g.insert(value).index for value in ["x", "y", "x", "z", "y"]]
    assert indices == [0, 1, 2, 3, 4]
    assert len(g) == 5
    assert not g.is_empty()


def test_insert_keeps_previous_weak_refs_valid():
    g = Graph()
    a = g.insert("A").weak()
    for i in range(50):
        g.insert(i)
    assert g.weak_ref(a).value == "A"


def test_connect_weighted_creates_directed_edge():
    g = Graph()
    a = g.insert("A").weak()
    b = g.insert("B").weak()
    g.connect_weighted(a, b, 7)

    assert [n.value for n in g.weak_ref(a).neighbors()] == ["B"]
    assert list(g.weak_ref(b).neighbors()) == []
    assert g._edge_weight(0, 1) == 7
    assert repr(g) == "Graph(nodes=2, edges=1)"


def test_connect_weighted_overwrites_weight():
    """Connecting the same ordered pair twice keeps one edge with the latest weight."""
    g = Graph()
    a = g.insert("A").weak()
    b = g.insert("B").weak()
    g.connect_weighted(a, b, 10)
    g.connect_weighted(a, b, 3)

    assert len(list(g.weak_ref(a).neighbors())) == 1
    assert g._edge_weight(a.index, b.index) == 3


def test_connect_undirected_weighted_two_equal_edges(triangle1):
    g, refs = triangle1
    a, c = refs["A"], refs["C"]

    assert g._edge_weight(a.index, c.index) == 3
    assert g._edge_weight(c.index, a.index) == 3
    assert c in [n.weak() for n in g.weak_ref(a).neighbors()]
    assert a in [n.weak() for n in g.weak_ref(c).neighbors()]


def test_connect_undirected_weighted_copies_weight():
    g = Graph()
    a = g.insert("A").weak()
    b = g.insert("B").weak()
    weight = [1, 2]
    g.connect_undirected_weighted(a, b, weight)

    forward = g._edge_weight(a.index, b.index)
    backward = g._edge_weight(b.index, a.index)
    assert forward == backward == [1, 2]
    assert forward is not backward


def test_connect_unweighted_uses_unit_weight():
    g = Graph()
    a = g.insert("A").weak()
    b = g.insert("B").weak()
    c = g.insert("C").weak()
    g.connect(a, b)
    g.connect_undirected(b, c)

    assert g._edge_weight(a.index, b.index) is None
    assert g._edge_weight(b.index, c.index) is None
    assert g._edge_weight(c.index, b.index) is None
    assert [n.value for n in g.weak_ref(b).neighbors()] == ["C"]


def test_unit_weight_from_config():
    g = Graph(config=GraphConfig(unit_weight=1))
    a = g.insert("A").weak()
    b = g.insert("B").weak()
    g.connect(a, b)
    assert g._edge_weight(a.index, b.index) == 1


def test_connect_out_of_range_raises():
    g = Graph()
    a = g.insert("A").weak()
    with pytest.raises(IndexError, match="not part of this graph"):
        g.connect_weighted(a, WeakNode(1), 1)
    with pytest.raises(IndexError, match="not part of this graph"):
        g.connect_undirected_weighted(WeakNode(5), a, 1)
    with pytest.raises(IndexError):
        g.connect(WeakNode(-1), a)
    # Nothing was added by the failed calls.
    assert list(g.weak_ref(a).neighbors()) == []


def test_neighbors_ascending_index_order():
    """Neighbor order follows destination index, not edge insertion order."""
    g = Graph()
    refs = [g.insert(i).weak() for i in range(5)]
    for dst in (4, 1, 3, 2):
        g.connect(refs[0], refs[dst])
    assert [n.index for n in g.weak_ref(refs[0]).neighbors()] == [1, 2, 3, 4]


def test_find_returns_first_match():
    g = Graph()
    g.insert("A")
    g.insert("B")
    g.insert("A")

    node = g.find("A")
    assert node is not None
    assert node.index == 0
    assert g.find("B").index == 1


def test_find_missing_returns_none():
    g = Graph()
    assert g.find("A") is None
    g.insert("A")
    assert g.find("Z") is None


def test_weak_ref_and_weak_mut_bounds():
    g = Graph()
    g.insert("A")
    with pytest.raises(IndexError, match="past end of graph"):
        g.weak_ref(WeakNode(1))
    with pytest.raises(IndexError, match="past end of graph"):
        g.weak_mut(WeakNode(3))


def test_arbitrary_node():
    g = Graph()
    with pytest.raises(IndexError, match="empty"):
        g.arbitrary_node()

    g.insert("first")
    g.insert("second")
    assert g.arbitrary_node().index == 0
    assert g.arbitrary_node().value == "first"


def test_nodes_in_pool_order(line1):
    g, _ = line1
    assert [n.value for n in g.nodes()] == ["A", "B", "C", "D"]


def test_copy_is_independent(triangle1):
    g, refs = triangle1
    clone = g.copy()

    assert len(clone) == len(g)
    assert clone.weak_ref(refs["B"]).value == "B"

    clone.weak_mut(refs["B"]).value = "changed"
    clone.connect_weighted(refs["C"], refs["C"], 9)

    assert g.weak_ref(refs["B"]).value == "B"
    assert refs["C"] not in [n.weak() for n in g.weak_ref(refs["C"]).neighbors()]
    assert clone.config is g.config


def test_dijkstras_method_delegates(triangle1):
    g, _ = triangle1
    path = g.dijkstras(g.find("A"), g.find("C"))
    assert path.indices == (0, 1, 2)
