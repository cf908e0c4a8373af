from zlang.nodes import Node, NodeKind


def test_node_defaults_are_empty():
    node = Node(NodeKind.ROOT)
    assert node.value == ""
    assert node.children == []


def test_default_children_are_independent():
    first = Node(NodeKind.STATEMENT_BLOCK)
    second = Node(NodeKind.STATEMENT_BLOCK)
    first.children.append(Node(NodeKind.FACTOR_IDENTIFIER, "x"))
    assert second.children == []
    assert len(first.children) == 1


def test_nodes_compare_structurally():
    a = Node(NodeKind.EXPRESSION_ADD, "", [Node(NodeKind.FACTOR_LITERAL_NUMBER, "1")])
    b = Node(NodeKind.EXPRESSION_ADD, "", [Node(NodeKind.FACTOR_LITERAL_NUMBER, "1")])
    c = Node(NodeKind.EXPRESSION_ADD, "", [Node(NodeKind.FACTOR_LITERAL_NUMBER, "2")])
    assert a == b
    assert (a == c) is False


def test_kinds_are_numbered_in_declaration_order():
    root = Node(NodeKind(0))
    assert root.kind is NodeKind.ROOT
    last = Node(max(NodeKind))
    assert last.kind is NodeKind.END
    values = [Node(kind).kind.value for kind in NodeKind]
    assert values == list(range(len(values)))