import pytest

from quill import repl
from quill.errors import InvalidHashMap, QuillException, QuillTypeError, SymbolNotFound
from quill.types.atom import Atom
from quill.types.collections import HashMap, List, Vector
from quill.types.nil import Nil
from quill.types.symbol import Keyword, Symbol


# -------------------------------
# Equality and predicates
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= [1 2 3] (list 1 2 3))", True),
        ("(= [1 [2]] (list 1 (list 2)))", True),
        ("(= {:a [1]} {:a (list 1)})", True),
        ("(= {:a 1} {:a 1 :b 2})", False),
        ("(= {:a 1} {:a 2})", False),
        ("(= {:a 1 :b 2} {:b 2 :a 1})", True),
        ('(= {"k" 1 :k 2} {:k 2 "k" 1})', True),
        ('(= {"k" 1} {:k 1})', False),
        ('(= "a" :a)', False),
        ("(= 1 true)", False),
        ("(= 0 false)", False),
        ("(= nil false)", False),
        ("(= nil nil)", True),
        ("(= 'a 'a)", True),
        ("(= (atom 1) (atom 1))", False),
        ("(let* (a (atom 1)) (= a a))", True),
        ("(= + +)", True),
        ("(= (fn* () 1) (fn* () 1))", False),
        ("(= [] ())", True),
    ],
)
def test_equality(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(nil? nil)", True),
        ("(nil? false)", False),
        ("(true? true)", True),
        ("(true? 1)", False),
        ("(false? false)", True),
        ("(false? nil)", False),
        ("(symbol? 'a)", True),
        ("(keyword? :a)", True),
        ('(keyword? "a")', False),
        ('(string? "a")', True),
        ("(string? :a)", False),
        ("(number? 1)", True),
        ("(number? true)", False),
        ("(fn? +)", True),
        ("(fn? (fn* () 1))", True),
        ("(fn? cond)", False),
        ("(macro? cond)", True),
        ("(list? '(1))", True),
        ("(list? [1])", False),
        ("(vector? [1])", True),
        ("(sequential? [1])", True),
        ("(sequential? '(1))", True),
        ("(sequential? {})", False),
        ("(map? {})", True),
        ("(atom? (atom 1))", True),
        ("(empty? [])", True),
        ("(empty? nil)", True),
        ("(empty? '(1))", False),
        ("(not nil)", True),
        ("(not 0)", False),
    ],
)
def test_predicates(interp, source, expected):
    assert interp.eval(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("nil", "nil"),
        ("true", "boolean"),
        ("1", "number"),
        ('"s"', "string"),
        ("'s", "symbol"),
        (":k", "keyword"),
        ("'(1)", "list"),
        ("[1]", "vector"),
        ("{}", "hash-map"),
        ("+", "function"),
        ("(fn* () 1)", "function"),
        ("cond", "macro"),
        ("(atom 1)", "atom"),
    ],
)
def test_type_of(interp, source, expected):
    assert interp.eval(f"(type-of {source})") == expected


def test_symbol_and_keyword_constructors(interp):
    assert interp.eval('(symbol "abc")') == Symbol("abc")
    assert interp.eval('(keyword "abc")') == Keyword("abc")
    assert interp.eval("(keyword :abc)") == Keyword("abc")
    with pytest.raises(QuillTypeError):
        interp.eval("(symbol 1)")


# -------------------------------
# Sequences
# -------------------------------
def test_list_and_vector_constructors(interp):
    assert isinstance(interp.eval("(list 1 2)"), List)
    assert isinstance(interp.eval("(vector 1 2)"), Vector)
    assert interp.eval("(list)") == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(count [1 2 3])", 3),
        ("(count nil)", 0),
        ("(cons 1 [2 3])", [1, 2, 3]),
        ("(cons 1 nil)", [1]),
        ("(concat [1] '(2) nil [3 4])", [1, 2, 3, 4]),
        ("(concat)", []),
        ("(nth [1 2 3] 1)", 2),
        ("(first [1 2])", 1),
        ("(first [])", Nil),
        ("(first nil)", Nil),
        ("(rest [1 2 3])", [2, 3]),
        ("(rest [])", []),
        ("(rest nil)", []),
        ("(conj '(1 2) 3 4)", [4, 3, 1, 2]),
        ("(conj [1 2] 3 4)", [1, 2, 3, 4]),
        ('(seq "ab")', ["a", "b"]),
        ('(seq "")', Nil),
        ("(seq [])", Nil),
        ("(seq nil)", Nil),
        ("(seq [1 2])", [1, 2]),
        ("(apply + 1 2 (list 3 4))", 10),
        ("(apply + [1 2])", 3),
        ("(apply list [])", []),
        ("(apply (fn* (& xs) (count xs)) 1 [2 3])", 3),
        ("(map (fn* (x) (* x x)) [1 2 3])", [1, 4, 9]),
        ("(map first [[1] [2]])", [1, 2]),
        ("(map + nil)", []),
    ],
)
def test_sequence_functions(interp, source, expected):
    assert interp.eval(source) == expected


def test_sequence_result_types(interp):
    assert isinstance(interp.eval("(cons 1 [2])"), List)
    assert isinstance(interp.eval("(concat [1] [2])"), List)
    assert isinstance(interp.eval("(rest [1 2])"), List)
    assert isinstance(interp.eval("(conj [1] 2)"), Vector)
    assert isinstance(interp.eval("(seq [1 2])"), List)
    assert isinstance(interp.eval("(vec '(1 2))"), Vector)
    assert isinstance(interp.eval("(map - [1])"), List)


def test_sequence_functions_do_not_mutate_arguments(interp):
    interp.eval("(def! v [1 2])")
    interp.eval("(cons 0 v)")
    interp.eval("(conj v 3)")
    interp.eval("(concat v v)")
    assert interp.eval("v") == [1, 2]


def test_nth_out_of_range_throws(interp):
    with pytest.raises(QuillException) as info:
        interp.eval("(nth [1] 5)")
    assert info.value.value == "index out of range"
    assert interp.eval("(try* (nth '() 0) (catch* e e))") == "index out of range"


@pytest.mark.parametrize("source", ["(count 1)", "(first :a)", "(cons 1 2)", "(nth [1] :a)", "(apply +)", "(map 1 [1])"])
def test_sequence_type_errors(interp, source):
    with pytest.raises(QuillTypeError):
        interp.eval(source)


def test_eval_uses_root_environment(interp):
    assert interp.eval("(eval (list + 1 2))") == 3
    assert interp.eval("(eval (read-string \"(+ 1 2)\"))") == 3
    interp.eval("(let* (z 1) (eval '(def! from-eval 7)))")
    assert interp.eval("from-eval") == 7
    with pytest.raises(SymbolNotFound):
        interp.eval("(let* (only-local 100) (eval 'only-local))")


# -------------------------------
# Hash maps
# -------------------------------
def test_hash_map_functions(interp):
    interp.eval('(def! m (hash-map :a 1 "b" 2))')
    assert isinstance(interp.eval("m"), HashMap)
    assert interp.eval("(get m :a)") == 1
    assert interp.eval('(get m "b")') == 2
    assert interp.eval("(get m :missing)") is Nil
    assert interp.eval("(get nil :a)") is Nil
    assert interp.eval("(contains? m :a)") is True
    assert interp.eval('(contains? m "a")') is False
    assert interp.eval("(count (keys m))") == 2
    assert sorted(interp.eval("(vals m)")) == [1, 2]


def test_assoc_and_dissoc_return_new_maps(interp):
    interp.eval("(def! m {:a 1})")
    assert interp.eval("(assoc m :b 2)") == {Keyword("a"): 1, Keyword("b"): 2}
    assert interp.eval("(assoc m :a 5)") == {Keyword("a"): 5}
    assert interp.eval("(dissoc (assoc m :b 2) :a :zzz)") == {Keyword("b"): 2}
    assert interp.eval("m") == {Keyword("a"): 1}


def test_hash_map_errors(interp):
    with pytest.raises(InvalidHashMap):
        interp.eval("(hash-map :a)")
    with pytest.raises(InvalidHashMap):
        interp.eval("(assoc {} 1 2)")
    with pytest.raises(QuillTypeError):
        interp.eval("(get [1] 0)")
    with pytest.raises(QuillTypeError):
        interp.eval("(keys [1])")


# -------------------------------
# Atoms
# -------------------------------
def test_atoms(interp):
    interp.eval("(def! a (atom 1))")
    assert isinstance(interp.eval("a"), Atom)
    assert interp.eval("@a") == 1
    assert interp.eval("(deref a)") == 1
    assert interp.eval("(reset! a 5)") == 5
    assert interp.eval("(swap! a + 10)") == 15
    assert interp.eval("(swap! a (fn* (x y) (* x y)) 3)") == 45
    assert interp.eval("@a") == 45


def test_atom_errors(interp):
    with pytest.raises(QuillTypeError):
        interp.eval("(deref 1)")
    with pytest.raises(QuillTypeError):
        interp.eval("(swap! (atom 1))")


# -------------------------------
# Metadata
# -------------------------------
def test_with_meta_returns_copy(interp):
    interp.eval("(def! v [1 2])")
    interp.eval("(def! w (with-meta v {:doc \"x\"}))")
    assert interp.eval("(meta w)") == {Keyword("doc"): "x"}
    assert interp.eval("(meta v)") is Nil
    assert interp.eval("(= v w)") is True
    assert isinstance(interp.eval("w"), Vector)


def test_meta_on_functions(interp):
    interp.eval("(def! f (with-meta (fn* (x) x) \"doc\"))")
    assert interp.eval("(meta f)") == "doc"
    assert interp.eval("(f 3)") == 3
    assert interp.eval("(meta (with-meta + 1))") == 1
    assert interp.eval("(meta +)") is Nil


def test_meta_reader_macro(interp):
    assert interp.eval("(meta ^{:a 1} [1 2])") == {Keyword("a"): 1}


def test_meta_on_plain_values(interp):
    assert interp.eval("(meta 1)") is Nil
    with pytest.raises(QuillTypeError):
        interp.eval("(with-meta 1 2)")


# -------------------------------
# Environment constants
# -------------------------------
def test_host_language_and_argv(interp):
    assert interp.eval("*host-language*") == "python"
    assert interp.eval("*ARGV*") == []


# -------------------------------
# File input
# -------------------------------
def test_slurp_of_undecodable_file_is_catchable(interp, tmp_path):
    bad = tmp_path / "bad.qll"
    bad.write_bytes(b"\xff\xfe\xfa")
    assert interp.eval(f'(try* (slurp "{bad}") (catch* e :caught))') == Keyword("caught")
    msg = interp.eval(f'(try* (slurp "{bad}") (catch* e e))')
    assert msg.startswith(f"cannot read {bad}")


def test_script_that_is_not_utf8_fails_cleanly(tmp_path, capsys):
    bad = tmp_path / "bad.qll"
    bad.write_bytes(b"\xff\xfe\xfa")
    assert repl.main([str(bad)]) == 1
    assert "cannot read" in capsys.readouterr().err
