# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re
from pathlib import Path
from runpy import run_path

from utest import utest, utest_val


root = Path(__file__).resolve().parent.parent.parent

# The example script checks its own output with an assertion.
example_globals = run_path(str(root/'examples/projects.py'))
result = example_globals['result']
utest_val(True, result.startswith('<!doctype html>\n<html lang="en">\n'), 'example starts with doctype')
utest_val(True, result.endswith('</html>\n'), 'example ends with closing html tag')

# The copy of the example embedded in the `render` docstring is current.
embed_globals = run_path(str(root/'tools/embed_example.py'))
embed = embed_globals['embed']
render_source = (root/'tagtree/render.py').read_text()
example_source = (root/'examples/projects.py').read_text().strip()
utest(render_source, embed, render_source, example_source)

embedded = embed('  filename: `examples/projects.py`\n  ```py\n  old\n  ```\n', 'a = 1\n\nb = 2')
utest_val('  filename: `examples/projects.py`\n  ```py\n  a = 1\n\n  b = 2\n  ```\n', embedded, 'embed replaces the block')
utest_val(None, re.search(r'[ ]+\n', embedded), 'no trailing whitespace')
