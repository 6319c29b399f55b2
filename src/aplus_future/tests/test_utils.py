import pytest


class TestPredicates:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, False),
            (True, False),
            (1, False),
            (1.0, False),
            (1j, False),
            ("s", False),
            (b"b", False),
            ([], True),
            ({}, True),
            (object(), True),
            (len, True),
        ],
    )
    def test_is_object_like(self, value, expected):
        from ..utils import is_object_like

        assert is_object_like(value) is expected

    @pytest.mark.parametrize(
        "value, expected", [(len, True), (lambda: None, True), (None, False), (1, False)]
    )
    def test_is_callable(self, value, expected):
        from ..utils import is_callable

        assert is_callable(value) is expected


class TestFunctional:
    def test_identity(self):
        from ..utils import identity

        value = object()
        assert identity(value) is value


class TestWarn:
    def test_warns_and_logs(self, caplog):
        from ..exceptions import FutureUsageWarning
        from ..utils import warn

        with pytest.warns(FutureUsageWarning, match="careful"):
            warn("careful")
        assert "careful" in caplog.text
