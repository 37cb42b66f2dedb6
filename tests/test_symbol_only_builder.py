"""
Tests for symbol-only enumeration construction.
"""
import pytest

from enum_next import (
    DuplicateKeyError,
    Enumeration,
    IdentityToken,
    NamingError,
    ShapeError,
    TypeMismatchError,
)


class TestSymbolOnlyValidation:
    """Names must form a non-empty sequence of unique, valid, textual names."""

    @pytest.mark.parametrize("names", [None, 1, True, 'ABC', {'A': 'A'}, [], ()])
    def test_refuses_non_sequences_and_empty_sequences(self, names):
        with pytest.raises(ShapeError, match="non-empty sequence"):
            Enumeration.symbols(names)

    def test_refuses_duplicate_names(self):
        with pytest.raises(DuplicateKeyError, match="Duplicate Enum constant for key 'A'"):
            Enumeration.symbols(['A', 'A'])

    @pytest.mark.parametrize("name", [1, None, True, 2.5, (), IdentityToken('A')])
    def test_refuses_non_string_names(self, name):
        with pytest.raises(TypeMismatchError, match="at index 0 to be of type str") as info:
            Enumeration.symbols([name])
        assert type(name).__name__ in str(info.value)

    def test_type_error_reports_position(self):
        with pytest.raises(TypeMismatchError, match="at index 2"):
            Enumeration.symbols(['A', 'B', 3])

    @pytest.mark.parametrize("name", ['a', '1A', 'A-A', '-A', '+A', '%A'])
    def test_refuses_invalid_names(self, name):
        with pytest.raises(NamingError, match=r"at index 0, violates this invariant"):
            Enumeration.symbols([name])

    def test_naming_error_reports_element_index(self):
        with pytest.raises(NamingError) as info:
            Enumeration.symbols(['A', 'B', 'bad'])
        assert info.value.index == 2


class TestSymbolOnlyConstruction:
    """Constants of a symbol-only enumeration are bare identity tokens."""

    def test_creates_enumeration(self):
        e = Enumeration.symbols(['A'])
        assert isinstance(e, Enumeration)
        assert e.symbol_only is True
        assert e.behaviour is None

    def test_constants_are_tokens(self, flags):
        for key in ('A', 'B', 'C'):
            token = flags[key]
            assert isinstance(token, IdentityToken)
            assert token.description == key
            assert str(token) == f'Symbol({key})'

    def test_tokens_carry_no_fields(self, flags):
        assert not hasattr(flags.A, 'value')
        assert not hasattr(flags.A, '_key_')

    def test_tokens_are_unique_per_construction(self):
        first = Enumeration.symbols(['A'])
        second = Enumeration.symbols(['A'])
        assert first.A != second.A
        assert first.A == first.A

    def test_keeps_declaration_order(self, flags):
        assert [str(token) for token in flags] == ['Symbol(C)', 'Symbol(A)', 'Symbol(B)']
