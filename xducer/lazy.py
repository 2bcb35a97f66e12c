from func_prototypes import typed

def irange(start, increment):
    while True:
        yield start
        start += increment

def naturals():
    """0, 1, 2, ... forever."""
    return irange(0, 1)

@typed(int)
def take(count):
    def taker(collection):
        remaining = count
        i = iter(collection)
        while remaining > 0:
            try:
                yield next(i)
            except StopIteration:
                return
            remaining = remaining - 1
    return taker

def consume(collection):
    for _ in collection:
        pass

def reductions(reducer, seed, iterable):
    """
    Lazy version of reduceWith: yields the accumulation after every value.
    The seed itself is not yielded.
    reductions is (b -> a -> b) -> b -> [a] -> [b]
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
        yield accumulation

class Reducible:
    """
    Iterable over a generator factory. Each iteration calls get_iterator again,
    so a Reducible can be walked more than once even when the source is infinite.
    Bounding an infinite source is up to the caller, see take.
    """
    def __init__(self, get_iterator):
        self.get_iterator = get_iterator

    def __iter__(self):
        return iter(self.get_iterator())

    def reduce(self, reducer, seed):
        """Running fold over a fresh sequence. The result is itself a Reducible."""
        return Reducible(lambda: reductions(reducer, seed, self.get_iterator()))
