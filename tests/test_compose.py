from xducer.transduce import compose, compositionOf, identity

plusFive = lambda x: x + 5
divideByTwo = lambda x: x / 2

def test_helpers():
    assert plusFive(3) == 8
    assert divideByTwo(8) == 4

def test_compose():
    assert compose(plusFive, divideByTwo)(3) == 4
    assert compose(divideByTwo, plusFive)(4) == 7

def test_compose_identity():
    assert compose()(5) == 5
    assert compose(plusFive) is plusFive

def test_compose_args():
    add = lambda x, y: x + y
    assert compose(add, plusFive)(1, 2) == 8
    assert compose(add, plusFive)(x=1, y=2) == 8

def test_compose_arities():
    inc = lambda x: x + 1
    for n in range(0, 20):
        assert compose(*[inc] * n)(0) == n

def test_compose_order_long():
    appenders = [lambda acc, i=i: acc + [i] for i in range(12)]
    assert compose(*appenders)([]) == list(range(12))

def test_compositionOf():
    both = compositionOf(plusFive, divideByTwo)
    assert both(3) == 4

def test_compose_empty_is_identity():
    assert compose() is identity
