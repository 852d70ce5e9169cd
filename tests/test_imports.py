"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from wrapped work."""

    def test_types(self) -> None:
        from wrapped import Blank, BlankType, Optional, Present, wrap

        assert wrap(42).unwrap() == 42
        assert Blank.is_blank()
        option: Optional[int] = wrap(1)
        assert isinstance(option, Present)
        assert isinstance(Blank, BlankType)

    def test_errors(self) -> None:
        from wrapped import EmptyAccess, Propagate

        assert issubclass(EmptyAccess, Exception)
        assert issubclass(Propagate, Exception)

    def test_decorators(self) -> None:
        from wrapped import lift, short_circuit

        assert callable(lift)
        assert callable(short_circuit)

    def test_config(self) -> None:
        from wrapped import WrappedConfig, get_config, init

        assert callable(init)
        assert callable(get_config)
        assert WrappedConfig().log_level is None


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_optional_module(self) -> None:
        from wrapped.optional import Blank, BlankType, Optional, Present, wrap

        assert wrap(None) is Blank
        assert Present is not None
        assert BlankType is not None
        assert Optional is not None

    def test_decorators_module(self) -> None:
        from wrapped.decorators import lift, short_circuit

        assert callable(lift)
        assert callable(short_circuit)

    def test_all_exports(self) -> None:
        import wrapped

        for name in wrapped.__all__:
            assert hasattr(wrapped, name), name
