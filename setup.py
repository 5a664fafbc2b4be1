# -*- coding: utf-8 -*-
from setuptools import setup

package_dir = \
{'': 'python'}

packages = \
['enumerables']

install_requires = \
['typing-extensions']

extras_require = \
{'test': ['pytest']}

setup_kwargs = {
    'name': 'enumerables',
    'version': '1.0.0',
    'description': 'Traversal functions (each, select, all/any/none, count, map, inject) over ordered indexable sequences',
    'long_description': "# enumerables\n\nFree functions traversing any ordered, finite sequence that supports `len()` and zero-based positional access:\n\n```python\nimport operator\n\nfrom enumerables import any_, inject, select\n\nselect([1, 2, 3, 4], lambda x: x % 2 == 0)    # [2, 4]\nany_([False, None, 0])                        # True, only False and None are falsy\ninject([1, 2, 3, 4], operator.add)            # 10\ninject([2, 3, 4], initial=1, combiner=operator.mul)  # 24\n```\n",
    'long_description_content_type': 'text/markdown',
    'package_dir': package_dir,
    'packages': packages,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.8,<4.0',
}


setup(**setup_kwargs)


# This setup.py was autogenerated using Poetry for backward compatibility with setuptools.
