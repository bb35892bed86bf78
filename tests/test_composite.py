import logging

from patternkit.composite import Branch, Leaf, main, print_tree, render_tree


def sample_tree():
    b1 = Branch("branch1", (Leaf("l3"),))
    return Branch("branch0", (Leaf("L0"), Leaf("L1"), b1))


def test_leaf_has_no_components():
    leaf = Leaf("L0")
    assert leaf.display() == "L0"
    assert list(leaf.components()) == []


def test_branch_exposes_children():
    child = Leaf("x")
    branch = Branch("root", (child,))
    assert branch.display() == "root"
    assert list(branch.components()) == [child]


def test_render_single_leaf():
    assert render_tree(Leaf("only")) == [" only"]


def test_render_sample_tree():
    assert render_tree(sample_tree()) == [
        " branch0",
        "  L0",
        "  L1",
        "  branch1",
        "   l3",
    ]


def test_render_counts_every_node():
    tree = Branch("a", (Branch("b", (Leaf("c"), Leaf("d"))), Leaf("e")))
    lines = render_tree(tree)
    assert [line.strip() for line in lines] == ["a", "b", "c", "d", "e"]


def test_print_tree_logs_rendered_lines(caplog):
    caplog.set_level(logging.INFO)
    print_tree(sample_tree())
    assert caplog.messages == render_tree(sample_tree())


def test_main_prints_sample(caplog):
    caplog.set_level(logging.INFO)
    main([])
    assert caplog.messages == render_tree(sample_tree())