"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from klaw_failable work."""

    def test_shapes(self) -> None:
        """Test importing the shapes from root."""
        from klaw_failable import Action, BiTransformer, Failable, Producer, Receiver, Transformer

        for shape in (Action, BiTransformer, Producer, Receiver, Transformer):
            assert issubclass(shape, Failable)

    def test_helpers(self) -> None:
        """Test importing construction helpers from root."""
        from klaw_failable import action, bi_transformer, producer, receiver, transformer

        assert callable(action)
        assert callable(producer)
        assert callable(receiver)
        assert callable(transformer)
        assert callable(bi_transformer)

    def test_errors_and_results(self) -> None:
        from klaw_failable import Err, FailureWrapper, Ok, Result

        assert issubclass(FailureWrapper, Exception)
        result: Result[int, Exception] = Ok(1)
        assert result.is_ok()
        assert Err(ValueError()).is_err()

    def test_config(self) -> None:
        from klaw_failable import FailableConfig, configure_logging, get_config, get_logger, init

        assert isinstance(get_config(), FailableConfig)
        assert callable(init)
        assert callable(configure_logging)
        assert get_logger() is not None


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_shapes_module(self) -> None:
        from klaw_failable.shapes import Action, BiTransformer, Failable, Producer, Receiver, Transformer

        assert Action is not None
        assert BiTransformer is not None
        assert Failable is not None
        assert Producer is not None
        assert Receiver is not None
        assert Transformer is not None

    def test_decorators_module(self) -> None:
        from klaw_failable.decorators import action, bi_transformer, producer, receiver, transformer

        assert callable(action)
        assert callable(bi_transformer)
        assert callable(producer)
        assert callable(receiver)
        assert callable(transformer)

    def test_same_objects(self) -> None:
        """Flat and submodule imports give the same objects."""
        import klaw_failable
        from klaw_failable.errors import FailureWrapper
        from klaw_failable.result import Ok
        from klaw_failable.shapes.bi_transformer import BiTransformer

        assert klaw_failable.FailureWrapper is FailureWrapper
        assert klaw_failable.Ok is Ok
        assert klaw_failable.BiTransformer is BiTransformer

    def test_all_is_complete(self) -> None:
        import klaw_failable

        for name in klaw_failable.__all__:
            assert hasattr(klaw_failable, name), name
