import logging
import sys

from lruhashcache import LruHashCache

root = logging.getLogger()
root.setLevel(logging.DEBUG)

ch = logging.StreamHandler(sys.stdout)
ch.setLevel(logging.DEBUG)
formatter = logging.Formatter('%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s')
ch.setFormatter(formatter)
root.addHandler(ch)

cache = LruHashCache(8)


def fibonacci(n):
    result = cache.look_up(n)
    if result is None:
        result = n if n < 2 else fibonacci(n - 1) + fibonacci(n - 2)
        cache.store(n, result)
    return result


if __name__ == '__main__':
    print(fibonacci(30))
    print(cache)
    print("hit ratio: %.3f" % cache.hit_ratio)
