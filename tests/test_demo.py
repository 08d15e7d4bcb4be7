import pytest

from dsakit.demo import main


@pytest.fixture
def run(capsys):
    def _run():
        status = main([])
        lines = capsys.readouterr().out.splitlines()
        return status, lines

    return _run


def test_main_succeeds(run):
    status, lines = run()
    assert status == 0
    assert len(lines) > 50


def test_dynamic_array_section(run):
    _, lines = run()
    assert "Element at index 1: 99" in lines
    assert "Error: Index out of range" in lines
    assert lines.count("10 99") >= 1


def test_singly_linked_list_section(run):
    _, lines = run()
    assert "Value at index 1: 20" in lines
    assert "10   20   40" in lines
    assert "10   20" in lines


def test_stack_sections(run):
    _, lines = run()
    assert lines.count("30 20 10") == 2
    assert lines.count("Top value: 30") == 2
    assert lines.count("20 10") == 2
    assert lines.count("Empty? No") == 2


def test_queue_sections(run):
    _, lines = run()
    assert lines.count("Queue content: 10 20 30") == 3
    assert lines.count("Queue content: 20 30 40 50") == 2
    assert lines.count("Exception: Queue is empty") == 3
    assert "Front value: 20" in lines


def test_doubly_linked_list_section(run):
    _, lines = run()
    assert "Print forward: 10 20 30" in lines
    assert "Print backward: 30 20 10" in lines
    assert "After set new value: 10 99 30" in lines
    assert "After pop: 10 99" in lines
    assert "Exception: Index out of range" in lines


def test_binary_search_tree_section(run):
    _, lines = run()
    assert "Inorder (LNR): 10 20 25 30 40" in lines
    assert "Reverse inorder (RNL): 40 30 25 20 10" in lines
    assert "Preorder (NLR): 30 20 10 25 40" in lines
    assert "Size of BST: 5" in lines


def test_binary_tree_section(run):
    _, lines = run()
    assert "Inorder: 2 5 7 10 12 15 20" in lines
    assert "Preorder: 10 5 2 7 15 12 20" in lines
    assert "Postorder: 2 7 5 12 20 15 10" in lines


def test_hash_sections(run):
    _, lines = run()
    assert "After removing 22:" in lines
    assert "Already exists" in lines
    assert "Inserted" not in lines


def test_heap_section(run):
    _, lines = run()
    assert "Heap elements: 10 20 40 30" in lines
    assert "Min value: 10" in lines


def test_trie_section(run):
    _, lines = run()
    assert "Search for 'cat': Found" in lines
    assert "Search for 'can': Not Found" in lines
    assert "Starts with 'ca': Yes" in lines
    assert "Starts with 'do': Yes" in lines
    assert "Starts with 'z': No" in lines


def test_disjoint_set_section(run):
    _, lines = run()
    assert "Are 0 and 1 connected? Yes" in lines
    assert "Are 1 and 2 connected? No" in lines
    assert "Are 3 and 5 connected? Yes" in lines


def test_graph_traversals_visit_every_node(run):
    _, lines = run()
    dfs = next(line for line in lines if line.startswith("DFS from A: "))
    visited = dfs.removeprefix("DFS from A: ").split()
    assert visited[0] == "A"
    assert sorted(visited) == ["A", "B", "C", "D", "E", "F"]
    assert "BFS from A: A B C D E F" in lines


def test_sections_in_order(run):
    _, lines = run()
    headings = [line.strip("-") for line in lines if line.startswith("-" * 10)]
    assert headings[0] == "Dynamic Arrays"
    assert headings[-1] == "Graph without map"
    assert headings.index("Binary Search Tree") < headings.index("Min Heap")


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_unknown_argument_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2