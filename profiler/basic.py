from lazyseq import range
from lazyseq import sequence


def int_generator():
  yield from range(0, 10_000_000)


pipeline = sequence(int_generator).map(lambda x: x * 2).filter(lambda x: x % 10 == 0)

pipeline.consume()
