import typing


class FutureError(Exception):
    pass


class SelfResolutionError(FutureError, TypeError):
    future: typing.Any

    def __init__(self, future: typing.Any):
        super().__init__(f"{future!r} cannot be resolved with itself")
        self.future = future


class InvalidSetupError(FutureError, TypeError):
    setup: typing.Any

    @property
    def message(self) -> str:
        return invalid_setup_message(self.setup)

    def __init__(self, setup: typing.Any):
        super().__init__(invalid_setup_message(setup))
        self.setup = setup


class InvalidStateError(FutureError):
    pass


class UnusableFutureError(FutureError):
    def __init__(self, future: typing.Any):
        super().__init__(
            f"{future!r} was constructed without a callable setup procedure and cannot be chained"
        )


class FutureUsageWarning(UserWarning):
    pass


def invalid_setup_message(setup: typing.Any) -> str:
    return (
        "a Future must be constructed with a callable setup procedure, "
        f"got {type(setup).__name__}"
    )
