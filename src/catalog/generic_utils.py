"""Shared utilities for extracting generic type parameters from handler classes."""

import typing


def get_generic_args_for_origin(
    klass: type,
    origin_classes: tuple[type, ...],
    min_args: int = 1,
) -> tuple[typing.Any, ...] | None:
    """
    Extract generic type arguments from a class that inherits from a Generic base.

    Walks the class hierarchy through __orig_bases__ (or plain __bases__) until it
    reaches a base whose origin is one of the given origin_classes, substituting
    type variables bound by intermediate generic bases on the way down, so
    ``class Concrete(Base[X, Y])`` with ``class Base(RequestHandler[_Req, _Resp])``
    resolves to ``(X, Y)``.

    Args:
        klass: The handler class (e.g. a subclass of RequestHandler[Req, Res]).
        origin_classes: Tuple of possible origin classes (e.g. (RequestHandler,)).
        min_args: Minimum number of type arguments required to consider the result valid.

    Returns:
        Tuple of type arguments (e.g. (Req, Res) or (N,)), or None if no base
        carries at least min_args arguments with a concrete first argument.
    """
    return _search(klass, origin_classes, min_args, {})


def _search(
    klass: type,
    origin_classes: tuple[type, ...],
    min_args: int,
    substitutions: typing.Dict[typing.TypeVar, typing.Any],
) -> tuple[typing.Any, ...] | None:
    for base in vars(klass).get("__orig_bases__", klass.__bases__):
        origin = typing.get_origin(base) or base
        args = tuple(
            substitutions.get(arg, arg) if isinstance(arg, typing.TypeVar) else arg
            for arg in typing.get_args(base)
        )
        if origin in origin_classes:
            if len(args) >= min_args and not isinstance(args[0], typing.TypeVar):
                return args
            continue
        if not isinstance(origin, type) or origin is typing.Generic:
            continue
        parameters = getattr(origin, "__parameters__", ())
        found = _search(origin, origin_classes, min_args, dict(zip(parameters, args)))
        if found is not None:
            return found
    return None
