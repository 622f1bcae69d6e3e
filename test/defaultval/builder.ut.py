# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from copy import copy, deepcopy
from pickle import dumps, loads

from defaultval.builder import (bool_default, bytes_default, DefaultValue, float_default, int_default, list_of, map_of,
  none_default, optional_of, pair_of, seq_of, set_of, str_default, triple_of, unwrap)
from defaultval.optional import Present
from utest import utest, utest_call, utest_exc, utest_val


# Primitives.

utest(0, unwrap, int_default())
utest(0.0, unwrap, float_default())
utest('', unwrap, str_default())
utest(False, unwrap, bool_default())
utest(b'', unwrap, bytes_default())
utest(None, unwrap, none_default())

utest_val(int, type(unwrap(int_default())))
utest_val(float, type(unwrap(float_default())))
utest_val(bool, type(unwrap(bool_default())))

utest_val(True, int_default() is int_default(), 'primitive builders are shared')


# Combinators.

utest(Present(''), unwrap, optional_of(str_default()))
utest(Present(Present(0)), unwrap, optional_of(optional_of(int_default())))
utest_val(False, unwrap(optional_of(optional_of(int_default()))) == Present(0), 'nested optionals are distinct')

utest((0,), unwrap, seq_of(int_default()))
utest([0], unwrap, list_of(int_default()))
utest([Present(0)], unwrap, list_of(optional_of(int_default())))
utest((('',),), unwrap, seq_of(seq_of(str_default())))

utest({0: ''}, unwrap, map_of(int_default(), str_default()))
utest({'': [0.0]}, unwrap, map_of(str_default(), list_of(float_default())))
utest({Present(0): None}, unwrap, map_of(optional_of(int_default()), none_default()))
utest({(0, ''): 0}, unwrap, map_of(pair_of(int_default(), str_default()), int_default()))

utest(frozenset({0}), unwrap, set_of(int_default()))
utest(frozenset({Present('')}), unwrap, set_of(optional_of(str_default())))

utest((0, ''), unwrap, pair_of(int_default(), str_default()))
utest((0, '', Present(0)), unwrap, triple_of(int_default(), str_default(), optional_of(int_default())))
utest(([0], {0: 0.0}), unwrap, pair_of(list_of(int_default()), map_of(int_default(), float_default())))


# Determinism.

@utest_call
def test_repeated_unwrap() -> None:
  builders = [
    int_default(),
    optional_of(list_of(int_default())),
    map_of(int_default(), seq_of(str_default())),
    triple_of(bool_default(), bytes_default(), set_of(int_default())),
  ]
  for b in builders:
    first = unwrap(b)
    for _ in range(3):
      utest(first, unwrap, b)
    utest_val(first, b.val, 'val property')


utest_val(optional_of(int_default()), optional_of(int_default()), 'structurally identical builders are equal')
utest_val(hash(optional_of(int_default())), hash(optional_of(int_default())), 'structurally identical builders hash equal')
utest_val(unwrap(map_of(int_default(), str_default())), unwrap(map_of(int_default(), str_default())))
utest_val(True, int_default() == float_default() == bool_default(), 'equality follows the wrapped value')
utest_val(False, int_default() == str_default())


# Nesting depth.

@utest_call
def test_deep_nesting() -> None:
  depth = 2000
  b:DefaultValue = int_default()
  for i in range(depth):
    b = (optional_of, list_of, seq_of)[i % 3](b)
  val = unwrap(b)
  for i in reversed(range(depth)):
    kind = (Present, list, tuple)[i % 3]
    utest_val(kind, type(val), f'level {i}')
    if isinstance(val, Present): val = val.val
    else:
      utest_val(1, len(val), f'level {i} length')
      val = val[0]
  utest_val(0, val, 'innermost value')


# Representation and immutability.

utest('DefaultValue(Present(0))', repr, optional_of(int_default()))
utest('DefaultValue({0: [0.0]})', repr, map_of(int_default(), list_of(float_default())))

utest_exc(TypeError, DefaultValue)
utest_exc(AttributeError('DefaultValue instances are immutable'), setattr, int_default(), '_val', 1)
utest_exc(AttributeError('DefaultValue instances are immutable'), delattr, int_default(), '_val')
utest(0, unwrap, int_default())


# Copying.

utest(optional_of(int_default()), copy, optional_of(int_default()))
utest(optional_of(int_default()), deepcopy, optional_of(int_default()))
utest({'stub': list_of(int_default())}, deepcopy, {'stub': list_of(int_default())})
utest(map_of(str_default(), seq_of(int_default())), lambda b: loads(dumps(b)), map_of(str_default(), seq_of(int_default())))

@utest_call
def test_copy_is_builder() -> None:
  b = deepcopy(pair_of(int_default(), optional_of(str_default())))
  utest_val(DefaultValue, type(b), 'copied type')
  utest((0, Present('')), unwrap, b)
  utest_exc(AttributeError('DefaultValue instances are immutable'), setattr, b, '_val', 1)


# Runtime preconditions.

utest_exc(TypeError, map_of, list_of(int_default()), str_default())
utest_exc(TypeError, map_of, pair_of(int_default(), list_of(int_default())), str_default())
utest_exc(TypeError, set_of, map_of(int_default(), int_default()))
utest_exc(TypeError, optional_of, 0)
utest_exc(TypeError, unwrap, Present(0))
utest_exc(TypeError, pair_of, int_default(), '')
