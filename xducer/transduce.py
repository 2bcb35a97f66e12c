# Transducers as plain higher order functions.
# A reducer is (b -> a -> b). A transducer takes a reducer and returns a reducer.

from typing import Callable, TypeVar

U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")

MapFunction = Callable[[U], V]
FilterFunction = Callable[[U], bool]
Reducer = Callable[[R, U], R]
Transducer = Callable[[Reducer[R, V]], Reducer[R, U]]


def reduceWith(reducer: Reducer[R, U], seed: R, iterable) -> R:
    """
    reduceWith takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell.
    reducer is (b -> a -> b)
    Seed is b
    iterable is [a]
    reduceWith is (b -> a -> b) -> b -> [a] -> b
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
    return accumulation

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Collects into a list accumulator in place, so the list isn't reallocated on
every step. The seed list is the one returned.
"""

listOf = lambda acc, val: acc + [val]
listOf.__doc__ = """Collects into a new list on every step. Seed is left untouched."""

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Reducer which computes a sum"""

countOf = lambda acc, _: acc + 1
countOf.__doc__ = """Reducer which counts the values it sees. The count lives in acc."""

def joinedWith(seperator, empty=''):
    """
    Joins values into a string, seed it with empty.
    An accumulator equal to empty means nothing has been joined yet. With the
    default '' leading empty strings are lost, use empty=None and a None seed
    to keep them.
    """
    def joint(acc, val):
        if acc == empty:
            return "%s" % (val,)
        else:
            return "%s%s%s" % (acc, seperator, val)
    return joint

compositionOf = lambda acc, val: lambda *args, **kwargs: val(acc(*args, **kwargs))
compositionOf.__doc__ = """Reducer over functions: folds val in after acc."""

def identity(x):
    return x

def compose(*fns):
    """
    Left to right composition as a fold: compose(f, g, h)(x) == h(g(f(x))).
    compose() is identity.
    """
    if fns:
        return reduceWith(compositionOf, fns[0], fns[1:])
    else:
        return identity

def map(fn: MapFunction[U, V]) -> Transducer[R, V, U]:
    """
    fn is (a -> c)
    map(fn)(reducer)(acc, val) == reducer(acc, fn(val))
    """
    def mapped(reducer: Reducer[R, V]) -> Reducer[R, U]:
        return lambda acc, val: reducer(acc, fn(val))
    return mapped

def filter(pred: FilterFunction[U]) -> Transducer[R, U, U]:
    """
    pred is (a -> Bool)
    reducer is (b -> a -> b)
    Rejected values return acc untouched, reducer is not called for them.
    """
    def filtered(reducer: Reducer[R, U]) -> Reducer[R, U]:
        return lambda acc, val: reducer(acc, val) if pred(val) else acc
    return filtered

def pipe(*transducers: Transducer) -> Transducer:
    """
    pipe(t1, t2, ..., tn)(seed) == t1(t2(...tn(seed)...))
    Values flow through t1 first and reach seed last, so
    pipe(map(f), filter(p)) maps and then filters.
    compose applies left to right, so the rightmost transducer has to be
    handed the seed reducer first.
    pipe() returns seed as is.
    """
    return compose(*reversed(transducers))

def transduce(xform: Transducer, reducer: Reducer[R, V], seed: R, iterable) -> R:
    """
    xform is a transducer
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]
    """
    return reduceWith(xform(reducer), seed, iterable)
