"""
Tests for the make_enum dispatcher and the validation config layer.
"""
import threading

import pytest

from enum_next import (
    ConfigError,
    Constant,
    Enumeration,
    EnumNextError,
    IdentityToken,
    NamingError,
    ReservedNameError,
    TypeMismatchError,
    ValidationConfig,
    get_current_validation_config,
    make_enum,
    set_current_validation_config,
    validation_config,
)


class TestMakeEnum:
    """make_enum routes to the keyed, symbol-only or concat builder."""

    def test_routes_mapping_and_missing_behaviour_to_keyed(self):
        assert make_enum(['A', {'a': 'a'}]).symbol_only is False
        e = make_enum(['A', {'a': 'a'}], {'shared': 1})
        assert isinstance(e.A, Constant)
        assert e.A.shared == 1

    def test_routes_false_to_keyed(self):
        e = make_enum(['A', 1], False)
        assert e.symbol_only is False
        assert e.A.value == 1

    def test_routes_true_to_symbol_only(self):
        e = make_enum(['A', 'B'], True)
        assert e.symbol_only is True
        assert isinstance(e.B, IdentityToken)

    def test_routes_enumerations_to_concat(self):
        first = make_enum(['A'], True)
        second = make_enum(['B'], True)
        result = make_enum([first, second])
        assert result.keys() == ['A', 'B']
        assert result.A is first.A

    def test_passes_options_to_concat(self):
        first = make_enum(['A', 1])
        result = make_enum([first, make_enum(['B'], True)], {'clean': True})
        assert result.A is not first.A
        assert result.A.value == 1

    @pytest.mark.parametrize("behaviour", [1, 'a', lambda: None, ['x']])
    def test_refuses_unrecognized_second_argument(self, behaviour):
        with pytest.raises(TypeMismatchError, match="to be a mapping"):
            make_enum(['A', {'a': 'a', 'b': 'b'}], behaviour)

    def test_mixed_sequence_is_not_a_concat(self):
        first = make_enum(['A'], True)
        with pytest.raises(NamingError):
            make_enum([first, 1])


class TestErrorTaxonomy:
    """Every construction error is a ConfigError and a built-in error."""

    def test_errors_share_base_classes(self):
        with pytest.raises(ConfigError):
            make_enum(['a', 1])
        with pytest.raises(ValueError):
            make_enum(['a', 1])
        with pytest.raises(TypeError):
            make_enum([1], True)
        with pytest.raises(EnumNextError):
            make_enum(['A', 'A'], True)


class TestValidationConfig:
    """The current validation config controls naming and reserved names."""

    def test_defaults(self):
        config = get_current_validation_config()
        assert config == ValidationConfig()
        assert config.is_valid_name('A_1')
        assert not config.is_valid_name('a')
        assert config.is_reserved('$key')
        assert config.is_reserved('_id_')
        assert not config.is_reserved('key')

    def test_context_manager_changes_pattern(self):
        with validation_config(name_pattern=r"[a-z]+"):
            e = Enumeration.symbols(['alpha', 'beta'])
            with pytest.raises(NamingError):
                Enumeration.symbols(['ALPHA'])
        assert e.keys() == ['alpha', 'beta']
        with pytest.raises(NamingError):
            Enumeration.symbols(['alpha'])

    def test_context_manager_restores_previous_config(self):
        outer = ValidationConfig(reserved_names=('$key', '$id', 'id'))
        set_current_validation_config(outer)
        with validation_config(reserve_sunder_names=False) as active:
            assert active.reserved_names == outer.reserved_names
            assert get_current_validation_config() is active
        assert get_current_validation_config() is outer

    def test_extra_reserved_names(self):
        with validation_config(reserved_names=('$key', '$id', 'id')):
            with pytest.raises(ReservedNameError):
                Enumeration.keyed(['A', {'id': 1}])

    def test_key_and_id_stay_reserved(self):
        with validation_config(reserved_names=()):
            with pytest.raises(ReservedNameError):
                Enumeration.keyed(['A', {'$id': 1}])

    def test_sunder_reservation_can_be_disabled(self):
        with validation_config(reserve_sunder_names=False):
            e = Enumeration.keyed(['A', {'_extra_': 1}])
        assert e.A['_extra_'] == 1

    def test_config_is_thread_local(self):
        seen = []
        set_current_validation_config(ValidationConfig(name_pattern=r"[a-z]+"))

        def worker():
            seen.append(get_current_validation_config())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [ValidationConfig()]
