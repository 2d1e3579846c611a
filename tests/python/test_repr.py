import lisparser
from lisparser import Ident, List, String


def test_repr_ident():
    assert repr(Ident("atom")) == "Ident('atom')"


def test_repr_string():
    assert repr(String("two words")) == "String('two words')"


def test_repr_flat_list():
    t = lisparser.read("(a b c)")
    assert repr(t) == "List([Ident('a'), Ident('b'), Ident('c')])"


def test_repr_nested_list():
    t = lisparser.read('(a ("b") ())')
    assert repr(t) == "List([Ident('a'), List([String('b')]), List([])])"


def test_str_atom():
    assert str(lisparser.read("atom")) == "atom"


def test_str_string():
    assert str(lisparser.read('"two words"')) == '"two words"'


def test_str_nested_list():
    t = lisparser.read("(a (b c) d)")
    assert str(t) == "(a (b c) d)"


def test_str_normalises_whitespace():
    t = lisparser.read("(  a\n\t(b   c)  d )")
    assert str(t) == "(a (b c) d)"


def test_str_empty_list():
    assert str(lisparser.read("( )")) == "()"
