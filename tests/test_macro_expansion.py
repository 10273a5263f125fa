import pytest

from quill.errors import QuillException, QuillTypeError
from quill.evaluation.evaluator import evaluate
from quill.evaluation.macro_expansion import expand_1, macro_for, macroexpand
from quill.printer import pr_str
from quill.reader.parser import read_str
from quill.types.closure import Closure
from quill.types.nil import Nil
from quill.types.symbol import Symbol

UNLESS = "(defmacro! unless (fn* (pred a b) (list 'if pred b a)))"


def test_defmacro_defines_macro(interp):
    interp.eval(UNLESS)
    value = interp.env.lookup(Symbol("unless"))
    assert isinstance(value, Closure)
    assert value.is_macro


def test_macro_call(interp):
    interp.eval(UNLESS)
    assert interp.eval("(unless false 1 2)") == 1
    assert interp.eval("(unless true 1 2)") == 2


def test_macroexpand_returns_unevaluated_expansion(interp):
    interp.eval(UNLESS)
    expansion = interp.eval("(macroexpand (unless false 1 2))")
    assert expansion == [Symbol("if"), False, 2, 1]
    assert interp.rep("(macroexpand (unless (= 1 2) (a) (b)))") == "(if (= 1 2) (b) (a))"


def test_macroexpand_of_non_macro_is_identity(interp):
    assert interp.rep("(macroexpand (+ 1 2))") == "(+ 1 2)"
    assert interp.eval("(macroexpand 5)") == 5


def test_macro_arguments_are_not_evaluated(interp):
    interp.eval("(defmacro! ignore (fn* (x) nil))")
    assert interp.eval("(ignore (undefined-function))") is Nil


def test_expansion_repeats_until_no_macro_head(interp):
    interp.eval(UNLESS)
    interp.eval("(defmacro! my-when (fn* (c & body) (list 'unless c nil (cons 'do body))))")
    assert interp.eval("(my-when true 1 2 3)") == 3
    assert interp.rep("(macroexpand (my-when x y))") == "(if x (do y) nil)"


def test_macros_only_expand_in_head_position(interp):
    interp.eval(UNLESS)
    assert interp.rep("(macroexpand (list (unless true 1 2)))") == "(list (unless true 1 2))"
    assert interp.eval("(list (unless true 1 2))") == [2]


def test_defmacro_requires_function(interp):
    with pytest.raises(QuillTypeError):
        interp.eval("(defmacro! m 1)")
    with pytest.raises(QuillTypeError):
        interp.eval("(defmacro! m +)")


def test_defmacro_leaves_original_function_unchanged(interp):
    interp.eval("(def! f (fn* (x) x))")
    interp.eval("(defmacro! m f)")
    assert interp.eval("(f 5)") == 5
    assert interp.eval("(macro? m)") is True
    assert interp.eval("(macro? f)") is False
    assert interp.eval("(fn? f)") is True
    assert interp.eval("(fn? m)") is False


def test_macro_from_quasiquote(interp):
    interp.eval("(defmacro! swap-args (fn* (f a b) `(~f ~b ~a)))")
    assert interp.eval("(swap-args - 1 10)") == 9


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond false 1 true 2)", "2"),
        ("(cond (= 1 1) :first true :second)", ":first"),
        ("(cond false 1)", "nil"),
        ("(cond)", "nil"),
    ],
)
def test_cond(interp, source, expected):
    assert interp.rep(source) == expected


def test_cond_with_odd_forms_throws(interp):
    with pytest.raises(QuillException) as info:
        interp.eval("(cond true)")
    assert info.value.value == "odd number of forms to cond"


def test_expand_1_and_macro_for(env):
    evaluate(read_str(UNLESS), env)
    form = read_str("(unless a b c)")
    assert macro_for(form, env) is env.lookup(Symbol("unless"))
    assert macro_for(read_str("(list 1)"), env) is None
    assert macro_for(read_str("()"), env) is None
    assert pr_str(expand_1(form, env, evaluate)) == "(if a c b)"
    assert macroexpand(read_str("(+ 1 2)"), env, evaluate) == [Symbol("+"), 1, 2]
