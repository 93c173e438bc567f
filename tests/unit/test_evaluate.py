import threading

import pytest

import calc_parser as cp

@pytest.mark.parametrize("text, expected", [
    ("2+3", 5.0),
    ("10-4", 6.0),
    ("3*4", 12.0),
    ("8/2", 4.0),
    ("10-4-2", 4.0),
    ("16/4/2", 2.0),
    ("2+3*4", 14.0),
    ("2*3+4", 10.0),
    ("(2+3)*4", 20.0),
    ("2*(3+4)", 14.0),
    ("(2+(3*4))*2", 28.0),
    ("2.5+1.5", 4.0),
    ("-5+3", -2.0),
    ("2*-3", -6.0),
    ("-2*-3", 6.0),
    ("--5", 5.0),
    ("-(2+3)", -5.0),
    ("((7))", 7.0),
])
def test_arithmetic(text, expected):
    assert cp.evaluate(text) == expected

def test_decimal_product_within_tolerance():
    assert cp.evaluate("3.14*2") == pytest.approx(6.28)

def test_complex_expression():
    assert cp.evaluate("(2+3)*(4-2)/3") == 10.0 / 3.0

def test_result_is_float():
    assert isinstance(cp.evaluate("2+3"), float)

def test_minus_role_depends_on_position():
    # (-8 / -2) / 2, each minus applied to the number it precedes
    assert cp.evaluate("-8/-2/2") == 2.0
    assert cp.evaluate("1--1") == 2.0

def test_whitespace_insensitive():
    assert cp.evaluate("2 + 3") == cp.evaluate("2+3")
    assert cp.evaluate(" ( 2 + 3 ) *\t4 ") == 20.0

def test_repeated_evaluation_is_identical():
    results = {cp.evaluate("(2+3)*(4-2)/3") for _ in range(5)}
    assert len(results) == 1

def test_concurrent_callers_share_nothing():
    results = []
    def work(text):
        results.append((text, cp.evaluate(text)))
    threads = [threading.Thread(target=work, args=(f"{i}*2+1",)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(results) == sorted((f"{i}*2+1", i * 2.0 + 1) for i in range(20))

def test_ieee_overflow_is_not_special_cased():
    big = "9" * 400
    assert cp.evaluate(f"{big}*{big}") == float("inf")

def test_max_depth_allows_nesting_within_limit():
    assert cp.evaluate("((1))", max_depth=2) == 1.0
    assert cp.evaluate("--1", max_depth=2) == 1.0

def test_deep_nesting_without_limit():
    text = "(" * 50 + "1" + ")" * 50
    assert cp.evaluate(text) == 1.0

@pytest.mark.parametrize("value, text", [
    (5.0, "5"),
    (-2.0, "-2"),
    (6.28, "6.28"),
    (10.0 / 3.0, "3.3333333333333335"),
    (float("inf"), "inf"),
])
def test_format_number(value, text):
    assert cp.format_number(value) == text
