from __future__ import annotations

from asciimath_unicode.parser.parse import parse_unicode
from asciimath_unicode.parser.tree import (
    NO_SCRIPT,
    Frac,
    Func,
    Group,
    Ident,
    Matrix,
    Missing,
    Number,
    Script,
    Simple,
    SimpleBinary,
    SimpleFunc,
    SimpleScript,
    SimpleUnary,
    Symbol,
    Text,
    is_plain,
    sole_simple,
)


def _plain(simple: Simple) -> SimpleScript:
    return SimpleScript(simple)


X = _plain(Ident("x"))


def test_scripts() -> None:
    assert parse_unicode("x_1^2") == (
        SimpleScript(Ident("x"), Script(Number("1"), Number("2"))),
    )
    assert parse_unicode("x^2") == (SimpleScript(Ident("x"), Script(sup=Number("2"))),)


def test_function_with_script() -> None:
    assert parse_unicode("log_2 x") == (Func("log", Script(sub=Number("2")), X),)


def test_function_without_argument() -> None:
    assert parse_unicode("sin") == (Func("sin", NO_SCRIPT, _plain(Missing())),)


def test_function_as_simple_operand() -> None:
    assert parse_unicode("x^sin y") == (
        SimpleScript(Ident("x"), Script(sup=SimpleFunc("sin", Ident("y")))),
    )


def test_fraction_binds_script_functions() -> None:
    assert parse_unicode("a/b_1") == (
        Frac(_plain(Ident("a")), SimpleScript(Ident("b"), Script(sub=Number("1")))),
    )


def test_unary_and_binary() -> None:
    assert parse_unicode("sqrt x") == (_plain(SimpleUnary("sqrt", Ident("x"))),)
    assert parse_unicode("root 3 x") == (
        _plain(SimpleBinary("root", Number("3"), Ident("x"))),
    )
    assert parse_unicode("frac a") == (_plain(SimpleBinary("frac", Ident("a"), Missing())),)


def test_text_and_symbols() -> None:
    assert parse_unicode('"hi" xx 1') == (
        _plain(Text("hi")),
        _plain(Symbol("xx")),
        _plain(Number("1")),
    )


def test_unterminated_group() -> None:
    assert parse_unicode("(x") == (_plain(Group("(", (X,), "")),)


def test_stray_closer() -> None:
    assert parse_unicode("x)^2") == (
        X,
        SimpleScript(Group("", (), ")"), Script(sup=Number("2"))),
    )


def test_pipe_groups() -> None:
    assert parse_unicode("|x|") == (_plain(Group("|", (X,), "|")),)
    assert parse_unicode("|x") == (_plain(Symbol("|")), X)
    assert parse_unicode("(|x)") == (_plain(Group("(", (_plain(Symbol("|")), X), ")")),)


def test_closer_ends_pipe_group() -> None:
    assert parse_unicode("|(x|)") == (
        _plain(Symbol("|")),
        _plain(Group("(", (X, _plain(Symbol("|"))), ")")),
    )


def test_matrix() -> None:
    one, two, three, four = (_plain(Number(str(n))) for n in range(1, 5))

    assert parse_unicode("[(1,2),(3,4)]") == (
        _plain(Matrix("[", (((one,), (two,)), ((three,), (four,))), "]")),
    )
    assert parse_unicode("|(1),(2)|") == (_plain(Matrix("|", (((one,),), ((two,),)), "|")),)


def test_not_a_matrix() -> None:
    (single,) = parse_unicode("(1,2)")
    assert isinstance(single.simple, Group)

    for text in ["[(1,2),[3,4]]", "[(1),(2,3)]", "[(1,2)]", "[(1,2),(3,4]"]:
        (item,) = parse_unicode(text)
        assert isinstance(item.simple, Group), text


def test_helpers() -> None:
    assert is_plain(X)
    assert not is_plain(SimpleScript(Ident("x"), Script(sup=Number("2"))))
    assert not is_plain(Frac(X, X))
    assert sole_simple((X,)) == Ident("x")
    assert sole_simple((X, X)) is None
