import timeit
from functools import partial
from tabulate import tabulate
from xducer.lazy import consume
from xducer.transduce import compose, transduce, reduceWith, arrayOf, sumOf, pipe
from xducer.transduce import map as transmap
from xducer.transduce import filter as transfilter

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_comprehension(ns):
    return sum([n for n in ns if isEven(n)])

def sum_even_filter(ns):
    return sum(filter(isEven, ns))

def sum_even_reduce(ns):
    return reduceWith(lambda acc, n: acc + n if isEven(n) else acc, 0, ns)

def sum_even_transduce(ns):
    return transduce(transfilter(isEven), sumOf, 0, ns)

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = getattr(case, '__name__', repr(case))
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_iter(nums):
    for n in nums:
        yield (n + 1) * (n + 1)

def inc_square_map(nums):
    return list(map(compose(inc, square), nums))

squares = transmap(square)
incs = transmap(inc)
inc_square_pipe = pipe(incs, squares)
inc_square_even_pipe = pipe(incs, squares, transfilter(isEven))

def inc_square_transduce_pipe(nums):
    return transduce(inc_square_pipe, arrayOf, [], nums)

def inc_square_even_comprehension(nums):
    return [n for n in [(num + 1) * (num + 1) for num in nums] if isEven(n)]

def inc_square_even_generators(nums):
    return list(filter(isEven, map(square, map(inc, nums))))

def inc_square_even_transduce(nums):
    return transduce(inc_square_even_pipe, arrayOf, [], nums)


hundredK = range(100000)

def test_sum_even():
    performance_compare(
        sum_even_loop,
        sum_even_comprehension,
        sum_even_filter,
        sum_even_reduce,
        sum_even_transduce,
        case_args=[hundredK],
        timeit_kwargs={'number': 100})

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        compose(inc_square_iter, list),
                        inc_square_map,
                        inc_square_transduce_pipe,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_intermediate_containers():
    performance_compare(inc_square_even_comprehension,
                        inc_square_even_generators,
                        inc_square_even_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_pipe_depth():
    shallow = pipe(*[incs] * 2)
    deep = pipe(*[incs] * 16)
    def depth_2(nums):
        consume(reduceWith(shallow(arrayOf), [], nums))
    def depth_16(nums):
        consume(reduceWith(deep(arrayOf), [], nums))
    performance_compare(depth_2, depth_16,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})


if __name__ == '__main__':
    test_sum_even()
    test_inc_square()
    test_intermediate_containers()
    test_pipe_depth()
