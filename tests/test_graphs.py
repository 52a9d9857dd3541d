import io

import pytest

from algokit.graphs import adjacency_matrix, format_matrix, main


def test_undirected_is_symmetric():
    matrix = adjacency_matrix(4, [(0, 1), (1, 2), (3, 0)])
    for u in range(4):
        for v in range(4):
            assert matrix[u][v] == matrix[v][u]
    assert matrix[0][1] == 1
    assert matrix[2][3] == 0


def test_directed_is_one_way():
    matrix = adjacency_matrix(3, [(0, 2)], directed=True)
    assert matrix[0][2] == 1
    assert matrix[2][0] == 0


def test_weighted_edges_store_weight():
    matrix = adjacency_matrix(3, [(0, 1, 7), (1, 2, 4)])
    assert matrix[0][1] == 7
    assert matrix[1][0] == 7
    assert matrix[2][1] == 4


def test_directed_weighted():
    matrix = adjacency_matrix(2, [(1, 0, 9)], directed=True)
    assert matrix == [[0, 0], [9, 0]]


@pytest.mark.parametrize("edge", [(0, 3), (-1, 0), (0,), (0, 1, 2, 3)])
def test_bad_edges_rejected(edge):
    with pytest.raises(ValueError):
        adjacency_matrix(3, [edge])


def test_format_matrix():
    assert format_matrix([[0, 1], [1, 0]]) == "0 1 \n1 0 \n"


def test_main_prints_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0 1 \n1 0 \n"


def test_main_directed_weighted(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n1 0 5\n"))
    assert main(["--directed", "--weighted"]) == 0
    assert capsys.readouterr().out == "0 0 \n5 0 \n"


def test_main_short_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err