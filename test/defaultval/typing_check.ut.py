# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from os.path import abspath, dirname, join as path_join
from subprocess import run
from sys import executable

from utest import utest_call, utest_val


@utest_call
def test_mypy_typing_check() -> None:
  'Every `type: ignore` in typing_check.py must be needed; an unused one means mypy accepted an expression it should reject.'
  test_dir = dirname(abspath(__file__))
  root_dir = dirname(dirname(test_dir))
  cmd = [executable, '-m', 'mypy', '--strict', '--warn-unused-ignores', path_join(test_dir, 'typing_check.py')]
  res = run(cmd, cwd=root_dir, capture_output=True, text=True)
  utest_val(0, res.returncode, f'mypy status:\n{res.stdout}{res.stderr}')
