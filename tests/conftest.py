from itertools import product


def pytest_addoption(parser):
    parser.addoption("--all", action="store_true", help="run all sequence combinations")


def generate_seqs(values, max_len):
    """Every sequence over values with length 0 through max_len."""
    seqs = []
    for length in range(max_len + 1):
        seqs.extend(list(seq) for seq in product(values, repeat=length))
    return seqs


def pytest_generate_tests(metafunc):
    if metafunc.config.getoption("all"):
        values = [-2, -1, 0, 1, 2, 3]
        max_len = 4
    else:
        values = [-1, 0, 1, 2]
        max_len = 3
    if "seq" in metafunc.fixturenames:
        metafunc.parametrize("seq", generate_seqs(values, max_len), ids=str)
