from xducer.transduce import \
    FilterFunction, \
    MapFunction,    \
    Reducer,        \
    Transducer,     \
    arrayOf,        \
    compose,        \
    countOf,        \
    filter,         \
    joinedWith,     \
    listOf,         \
    map,            \
    pipe,           \
    reduceWith,     \
    sumOf,          \
    transduce
