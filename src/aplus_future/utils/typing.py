import typing

_PRIMITIVES = (bool, int, float, complex, str, bytes)


def is_callable(value: typing.Any) -> bool:
    return callable(value)


def is_object_like(value: typing.Any) -> bool:
    """
    Tells whether ``value`` may carry members worth probing, i.e. it is neither
    ``None`` nor a scalar primitive.
    """
    return value is not None and not isinstance(value, _PRIMITIVES)
