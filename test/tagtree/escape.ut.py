# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tagtree import escape
from tagtree.escape import fmt_attr_val, prefer_int
from utest import utest


utest('', escape, '')
utest('plain text', escape, 'plain text')
utest('&lt;script&gt;alert(&quot;R&amp;D&quot;);&lt;/script&gt;', escape, '<script>alert("R&D");</script>')

# Single quotes and other characters are left alone.
utest("it's é", escape, "it's é")

# Existing entities are escaped again.
utest('&amp;amp;', escape, '&amp;')
utest('&amp;lt;', escape, escape('<'))

utest(1, prefer_int, 1.0)
utest(1.5, prefer_int, 1.5)
utest('x', prefer_int, 'x')

utest('1', fmt_attr_val, 1)
utest('1', fmt_attr_val, 1.0)
utest('-2.25', fmt_attr_val, -2.25)
utest('a"b', fmt_attr_val, 'a"b')

utest('NaN', fmt_attr_val, float('nan'))
utest('Infinity', fmt_attr_val, float('inf'))
utest('-Infinity', fmt_attr_val, float('-inf'))
