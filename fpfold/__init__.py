from fpfold.transduce import \
    arrayOf,         \
    composePipeline, \
    filterStep,      \
    fold,            \
    mapStep,         \
    sumOf,           \
    transduce
