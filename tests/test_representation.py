import io

import pytest

from graphkit.representation import (
    adjacency_list,
    adjacency_matrix,
    format_matrix,
    main,
    parse_edge_input,
)


def test_parse_edge_input_reads_counts_and_pairs():
    count, edges = parse_edge_input("3 2\n1 2\n2 3\n")
    assert count == 3
    assert edges == [(1, 2), (2, 3)]


def test_parse_edge_input_ignores_extra_tokens():
    count, edges = parse_edge_input("2 1 1 2 9 9")
    assert (count, edges) == (2, [(1, 2)])


@pytest.mark.parametrize("text", ["", "4", "3 2 1 2", "a b", "-1 0", "3 -2"])
def test_parse_edge_input_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_edge_input(text)


def test_adjacency_list_is_symmetric_and_one_based():
    edges = [(1, 2), (2, 3), (1, 3)]
    adjacency = adjacency_list(3, edges)
    assert len(adjacency) == 4
    assert adjacency[0] == []
    for u, v in edges:
        assert v in adjacency[u]
        assert u in adjacency[v]
    assert sum(len(neighbours) for neighbours in adjacency) == 2 * len(edges)


def test_adjacency_list_keeps_input_order():
    adjacency = adjacency_list(4, [(1, 4), (1, 2), (1, 3)])
    assert adjacency[1] == [4, 2, 3]


def test_adjacency_list_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        adjacency_list(2, [(1, 3)])


def test_adjacency_matrix_is_symmetric():
    edges = [(1, 2), (2, 4), (3, 4)]
    matrix = adjacency_matrix(4, edges)
    assert len(matrix) == 5
    assert all(len(row) == 5 for row in matrix)
    for i in range(5):
        for j in range(5):
            assert matrix[i][j] == matrix[j][i]
    assert sum(map(sum, matrix)) == 2 * len(edges)
    for u, v in edges:
        assert matrix[u][v] == 1


def test_adjacency_matrix_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        adjacency_matrix(3, [(4, 1)])


def test_matrix_and_list_agree():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    matrix = adjacency_matrix(4, edges)
    adjacency = adjacency_list(4, edges)
    for u in range(5):
        assert sorted(v for v in range(5) if matrix[u][v]) == sorted(adjacency[u])


def test_format_matrix_skips_padding_row_and_column():
    matrix = adjacency_matrix(2, [(1, 2)])
    assert format_matrix(matrix) == "0 1\n1 0"


def test_format_matrix_has_one_line_per_vertex():
    matrix = adjacency_matrix(5, [(1, 5)])
    lines = format_matrix(matrix).splitlines()
    assert len(lines) == 5
    assert all(len(line.split()) == 5 for line in lines)


def test_main_prints_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n1 2\n2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Adjacency Matrix:"
    expected = format_matrix(adjacency_matrix(3, [(1, 2), (2, 3)])).splitlines()
    assert out[1:] == expected


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n1 7\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err