"""Very general-purpose utilities"""

from typing import Callable, Iterable, TypeVar

from expression import Option, Result, curry_flip
from expression import result
from numpydoc_decorator import doc

_A = TypeVar("_A")
_E = TypeVar("_E", bound=BaseException)
_R = TypeVar("_R", covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")


@curry_flip(1)
@doc(
    summary="Build a function which finds the first element from a given collection satisfying the given predicate",
    parameters=dict(
        items="The collection in which to search", 
        predicate="The criterion for selecting the first element",
    ), 
    returns="A function which finds the first element in a given collection which satisfies the given predicate",
)
def find_first_option(items: Iterable[_A], predicate: Callable[[_A], bool]) -> Option[_A]:
    for a in items:
        if predicate(a):
            return Option.Some(a)
    return Option.Nothing()
