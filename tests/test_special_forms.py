import pytest

from symbex.types.atom import Atom
from symbex.types.nil import NIL, TRUE
from symbex.types.slist import SList


def A(text):
    return Atom(text)


def L(*items):
    return SList(items)


# ------------------ quote ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote A)", A("A")),
        ("(quote 1)", A("1")),
        ("(quote (A B C))", L(A("A"), A("B"), A("C"))),
        ("(quote (quote X))", L(A("quote"), A("X"))),
        (
            "(quote (quote(quote (1 2))))",
            L(A("quote"), L(A("quote"), L(A("1"), A("2")))),
        ),
        ("(quote (car (quote (a))))", L(A("car"), L(A("quote"), L(A("a"))))),
        ("(quote a b)", NIL),
    ],
)
def test_quote(itp, source, expected):
    assert itp.eval(source) == expected


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond ((atom (quote A)) (quote B)) ((quote true) (quote C)))", A("B")),
        ("(cond ((atom (quote (A))) (quote B)) ((quote true) (quote C)))", A("C")),
        ("(cond (() a))", NIL),
        ("(cond (a))", NIL),
        ("(cond (() a) b)", NIL),
        ("(cond ((quote true) a) b)", A("a")),
        ("(cond (x (quote (1 2))))", L(A("1"), A("2"))),
        # only the empty list is false; a list holding it is not
        ("(cond ((quote (())) a) (true b))", A("a")),
    ],
)
def test_cond(itp, source, expected):
    assert itp.eval(source) == expected


def test_cond_stops_at_first_true_clause(itp, out):
    itp.eval("(cond ((atom (quote A)) (println first)) ((quote true) (println second)))")
    assert out.getvalue() == "first\n"


def test_cond_evaluates_tests_lazily_in_order(itp, out):
    itp.eval("(cond (a (println yes)) ((println never) b))")
    assert out.getvalue() == "yes\n"


def test_cond_skips_consequents_of_false_tests(itp, out):
    assert itp.eval("(cond ((println t1) (println c1)) (true (println c2)))") == NIL
    assert out.getvalue() == "t1\nc2\n"


# ------------------ define ------------------

def test_define_binds_parameters_by_position(itp):
    assert itp.eval("(define TEST (x y) (atom x))") == NIL
    assert itp.eval("(TEST a b)") == TRUE
    assert itp.eval("(TEST (quote (1 2 3)) b)") == NIL


def test_define_from_properties(itp):
    itp.eval("(define f (x y) (atom x))")
    assert itp.eval("(f A B)") == TRUE
    assert itp.eval("(f (quote (1)) B)") == NIL


def test_define_does_not_evaluate_body(itp, out):
    itp.eval("(define f (x) (println boom))")
    assert out.getvalue() == ""
    itp.eval("(f a)")
    assert out.getvalue() == "boom\n"


def test_define_recursive_function(itp):
    assert itp.eval("(define ff (x) (cond ((atom x) x) (true (ff (car x)))))") == NIL
    assert itp.eval("(ff (quote ((a b) c)))") == A("a")


def test_redefinition_replaces(itp):
    itp.eval("(define f (x) (quote one))")
    itp.eval("(define f (x) (quote two))")
    assert itp.eval("(f a)") == A("two")


def test_too_few_arguments_read_as_nil(itp):
    itp.eval("(define second (x y) y)")
    assert itp.eval("(second a)") == NIL


@pytest.mark.parametrize(
    "source",
    [
        "(define (f) (x) x)",
        "(define f x x)",
        "(define f (x))",
        "(define f (x) x extra)",
    ],
)
def test_malformed_define_degrades(itp, source):
    assert itp.eval(source) == NIL
    assert itp.env.user_names() == []


# ------------------ lambda ------------------

def test_lambda_applied_in_place(itp):
    assert itp.eval("( (lambda (x y) (atom x)) () b)") == NIL
    assert itp.eval("( (lambda (x y) (atom x)) a b)") == TRUE


def test_lambda_returns_a_synthetic_name(itp):
    name = itp.eval("(lambda (x) x)")
    assert isinstance(name, Atom)
    assert name.text.startswith("TMP$")
    assert itp.env.is_bound(name.text)


def test_lambda_names_are_unique(itp):
    first = itp.eval("(lambda (x) x)")
    second = itp.eval("(lambda (x) x)")
    assert first != second


def test_lambda_is_single_use(itp):
    name = itp.eval("(lambda (x) (atom x))")
    assert itp.eval_value(L(name, A("a"))) == TRUE
    assert not itp.env.is_bound(name.text)
    # second application: nothing bound, the list comes back as data
    assert itp.eval_value(L(name, A("a"))) == L(name, A("a"))
    assert itp.eval(f"({name.text} b)") == L(name, A("b"))


def test_lambda_passed_as_argument(itp):
    itp.eval("(define apply1 (f x) (f x))")
    assert itp.eval("(apply1 (lambda (y) (cons y (quote (z)))) a)") == L(A("a"), A("z"))


@pytest.mark.parametrize("source", ["(lambda x y)", "(lambda (x))", "(lambda (x) y z)"])
def test_malformed_lambda_degrades(itp, source):
    assert itp.eval(source) == NIL
    assert itp.env.user_names() == []
