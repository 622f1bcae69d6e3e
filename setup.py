# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='defaultval',
  version='0.0.1',
  description='Composable, deterministic default values for nested generic types.',
  python_requires='>=3.10',

  packages=['defaultval'],
  package_data={'defaultval': ['py.typed']},
  extras_require={'test': ['mypy']},
)
