import pytest
from extrema.services.errors import ElementTypeError, EmptyInputError, HeterogeneousInputError
from extrema.services.kinds import ElementKind, check_homogeneous, classify, element_kind

def test_classify_int_and_float():
    assert classify([1, 2, 3]) is ElementKind.INTEGER
    assert classify([1.5, 2.0]) is ElementKind.FLOAT

def test_classify_looks_at_first_element_only():
    assert classify([1, "x"]) is ElementKind.INTEGER

def test_classify_rejects_non_numeric():
    with pytest.raises(ElementTypeError, match="INT or FLOAT"):
        classify(["a", "b"])

def test_classify_rejects_bool():
    assert element_kind(True) is None
    with pytest.raises(ElementTypeError):
        classify([True, False])

def test_classify_empty():
    with pytest.raises(EmptyInputError):
        classify([])

def test_check_homogeneous_reports_first_mismatch():
    with pytest.raises(HeterogeneousInputError) as info:
        list(check_homogeneous([1, 2, 3.0, "x"], ElementKind.INTEGER))
    assert info.value.index == 2
    assert info.value.expected == "INT"

def test_element_type_error_is_a_type_error():
    with pytest.raises(TypeError):
        classify([None])

def test_element_kind_limits():
    assert element_kind(2**63 - 1) is ElementKind.INTEGER
    assert element_kind(-(2**63)) is ElementKind.INTEGER
    assert element_kind(2**63) is None
    assert element_kind(float("inf")) is None
    assert element_kind(float("nan")) is None

def test_check_homogeneous_rejects_non_finite_later_element():
    with pytest.raises(ElementTypeError):
        list(check_homogeneous([1.0, float("nan")], ElementKind.FLOAT))
