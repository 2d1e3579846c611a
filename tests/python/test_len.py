import pytest

import lisparser


def test_len_flat_list():
    t = lisparser.read("(a b c)")
    assert len(t) == 3


def test_len_nested_list():
    t = lisparser.read("(a (b c) d)")
    assert len(t) == 3


def test_len_empty_list():
    t = lisparser.read("()")
    assert len(t) == 0


def test_len_atom_raises():
    t = lisparser.read("atom")
    with pytest.raises(TypeError):
        len(t)


def test_node_len():
    t = lisparser.read("(a (b c d) e)")
    assert len(t[1]) == 3
