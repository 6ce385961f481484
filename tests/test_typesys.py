import pytest

from expc.typesys import Type, TypeInterner, TypeKind, emit_type


@pytest.fixture
def interner():
    return TypeInterner()


def test_scalar_types_are_unique(interner):
    assert interner.nil_type() is interner.nil_type()
    assert interner.boolean_type() is interner.boolean_type()
    assert interner.i64_type() is interner.i64_type()
    assert interner.i64_type() is not interner.boolean_type()


def test_scalar_kinds(interner):
    assert interner.nil_type().kind is TypeKind.NIL
    assert interner.boolean_type().kind is TypeKind.BOOLEAN
    assert interner.i64_type().kind is TypeKind.I64


def test_tuple_types_are_interned(interner):
    i64 = interner.i64_type()
    boolean = interner.boolean_type()
    first = interner.tuple_type([i64, boolean])
    second = interner.tuple_type((i64, boolean))
    other = interner.tuple_type([boolean, i64])
    assert first is second
    assert first is not other
    assert first.element_types == (i64, boolean)


def test_function_types_are_interned(interner):
    i64 = interner.i64_type()
    first = interner.function_type(i64, [i64, i64])
    second = interner.function_type(i64, (i64, i64))
    other = interner.function_type(interner.nil_type(), [i64, i64])
    assert first is second
    assert first is not other
    assert first.argument_types == (i64, i64)
    assert first.return_type is i64


def test_structural_equality_without_interning():
    assert Type(TypeKind.TUPLE, (Type(TypeKind.I64),)) == Type(
        TypeKind.TUPLE, (Type(TypeKind.I64),)
    )
    assert Type(TypeKind.I64) != Type(TypeKind.BOOLEAN)


def test_is_scalar(interner):
    i64 = interner.i64_type()
    assert i64.is_scalar()
    assert interner.nil_type().is_scalar()
    assert interner.boolean_type().is_scalar()
    assert not interner.tuple_type([i64]).is_scalar()
    assert not interner.function_type(i64, []).is_scalar()


def test_emit_scalar_types(interner):
    assert emit_type(interner.i64_type()) == "i64"
    assert emit_type(interner.boolean_type()) == "bool"
    assert emit_type(interner.nil_type()) == "nil"


def test_emit_composite_types_contain_components(interner):
    i64 = interner.i64_type()
    boolean = interner.boolean_type()
    pair = interner.tuple_type([i64, boolean])
    text = emit_type(pair)
    assert emit_type(i64) in text and emit_type(boolean) in text
    assert text.index(emit_type(i64)) < text.index(emit_type(boolean))
    function = interner.function_type(boolean, [pair])
    function_text = emit_type(function)
    assert text in function_text
    assert function_text.endswith(emit_type(boolean))
    assert str(function) == function_text


def test_element_types_of_non_tuple_raises(interner):
    with pytest.raises(TypeError):
        interner.i64_type().element_types


def test_argument_types_of_non_function_raises(interner):
    with pytest.raises(TypeError):
        interner.tuple_type([]).argument_types


def test_function_type_needs_return_type():
    with pytest.raises(ValueError):
        Type(TypeKind.FUNCTION, ())


def test_scalar_type_rejects_components():
    with pytest.raises(ValueError):
        Type(TypeKind.I64, (Type(TypeKind.I64),))