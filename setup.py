# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='tagtree',
  version='0.1.0',
  description='tagtree builds HTML as a tree of immutable nodes and renders it with correct escaping.',
  python_requires='>=3.10',
  packages=find_packages(include=['tagtree', 'tagtree.*', 'utest']),
  package_data={'tagtree': ['py.typed']},
)
