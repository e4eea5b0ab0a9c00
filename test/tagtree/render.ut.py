# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tagtree import comment, Element, Node, raw, render, render_parts, RenderOptions, tag, ToHtml, UnrenderableValue
from utest import utest, utest_exc, utest_seq, utest_val


no_ws = RenderOptions(indent_text='', insert_newlines=False)


class Banner(ToHtml):
  def __init__(self, title:str) -> None:
    self.title = title
    self.count = 0

  def to_html(self):
    self.count += 1
    return tag('div', {'class': 'banner'}, self.title)


class Nested(ToHtml):
  def to_html(self):
    return [Banner('inner'), 'after']


# Text.

utest('&lt;script&gt;alert(&quot;R&amp;D&quot;);&lt;/script&gt;\n', render, '<script>alert("R&D");</script>')
utest('', render, None)
utest('', render, [])
utest('', render, [None, []])
utest('a\nb\n', render, ['a', ['b']])
utest('ab', render, ['a', 'b'], no_ws)
utest('<b>\n', render, '<b>', raw_text=True)

# Text equal to the name of a raw text tag is not escaped; other text is.
utest('script\n', render, 'script')
utest('textarea\n', render, 'textarea')
utest('div\n', render, 'div')


# Attributes.

utest('<input>\n', render, tag('input', {'checked': False}))
utest('<input checked>\n', render, tag('input', {'checked': True}))
utest('<input>\n', render, tag('input', {'checked': None}))
utest('<input value="a&quot;b">\n', render, tag('input', {'value': 'a"b'}))
utest('<input value="&lt;&amp;&gt;">\n', render, tag('input', {'value': '<&>'}))
utest('<input size="10" step="0.5" min="1">\n', render, tag('input', {'size': 10, 'step': 0.5, 'min': 1.0}))
utest('<a z="1" id="x" b>\n</a>\n', render, tag('a', {'z': 1, 'id': 'x', 'hidden': False, 'b': True}, None), indent_text='')
utest('<div data-x="" hidden></div>', render, tag('div', {'data-x': '', 'hidden': True}), no_ws)
utest('<meter value="NaN" max="Infinity"></meter>', render, tag('meter', {'value': float('nan'), 'max': float('inf')}), no_ws)


# Void and raw text elements.

utest('<br>\n', render, tag('br'))
utest('<img src="a.png">\n', render, tag('img', {'src': 'a.png'}))
utest('<script></script>\n', render, tag('script'))
utest('<div></div>\n', render, tag('div'))
utest('<div></div>\n', render, tag('div', None))
utest('<div></div>\n', render, tag('div', ''))
utest('<div></div>\n', render, tag('div', []))
utest('<style></style>', render, tag('style', []), no_ws)

utest('<style>body { background-image: url("background.png"); }</style>',
  render, tag('style', 'body { background-image: url("background.png"); }'), no_ws)
utest('<script>if (a < b && c) {}</script>', render, tag('script', 'if (a < b && c) {}'), no_ws)
utest('<title>Q&A</title>', render, tag('title', 'Q&A'), no_ws)
utest('<textarea><b></textarea>', render, tag('textarea', '<b>'), no_ws)
utest('<style>\na > b {}\nb > c {}\n</style>\n', render, tag('style', ['a > b {}', 'b > c {}']), indent_text='')

# Raw text applies only to direct text; elements nested inside reset it.
utest('<script><b>&lt;i&gt;</b></script>', render, tag('script', tag('b', '<i>')), no_ws)

# A void element with content still renders the content.
utest('<br>x</br>', render, tag('br', 'x'), no_ws)


# Nesting and indentation.

utest('<div>\n  <span>\n    x\n  </span>\n</div>\n', render, tag('div', [tag('span', 'x')]))
utest('<div>\n  <span>\n    hello\n  </span>\n</div>\n', render, [tag('div', {}, [tag('span', 'hello')])])
utest('<div><br></div>', render, tag('div', tag('br')), no_ws)
utest('<h1>Header</h1>', render, tag('h1', 'Header'), no_ws)
utest('<div><br><br></div>', render, tag('div', [tag('br'), tag('br')]), no_ws)
utest('<div id="a"><br><br></div>', render, tag('div', {'id': 'a'}, tag('br'), tag('br')), no_ws)
utest('\t<p>\n\t\tx\n\t</p>\n', render, tag('p', 'x'), indent_level=1, indent_text='\t')
utest('<p>  x</p>', render, tag('p', 'x'), indent_text='  ', insert_newlines=False)
utest('    <p>      x    </p>', render, tag('p', 'x'), indent_level=2, insert_newlines=False)

# Deep nesting within the recursion limit.
deep:Node = 'x'
for _ in range(200): deep = tag('div', deep)
deep_out = render(deep, no_ws)
utest_val(True, deep_out.startswith('<div>' * 200 + 'x</div>'), 'deep nesting')
utest_val(200 * len('<div></div>') + 1, len(deep_out), 'deep nesting length')


# Raw nodes and comments.

utest('<div><b>bold</b></div>', render, tag('div', raw('<b>bold</b>')), no_ws)
utest('<!-- comment -->', render, comment('comment'), no_ws)
utest('<!-- ok -->\n', render, comment('ok'))
utest('<p>\n  <!-- note -->\n  x &amp; y\n</p>\n', render, tag('p', {}, comment('note'), 'x & y'))


# Doctype.

utest('<!doctype html>\n', render, [], doctype='html')
utest('<!doctype html>\n<br>', render, tag('br'), no_ws, doctype='html')
utest('<br>\n', render, tag('br'), doctype='')
utest('<!doctype html>\n<br>', render, tag('br'), RenderOptions(insert_newlines=False, doctype='html'))


# ToHtml.

banner = Banner('Banner')
utest('<div class="banner">Banner</div>', render, banner, no_ws)
utest('<section><div class="banner">Banner</div></section>', render, tag('section', banner), no_ws)
utest('<div class="banner">inner</div>after', render, Nested(), no_ws)

# ToHtml objects are resolved every time they are rendered.
counted = Banner('x')
render([counted, counted], no_ws)
utest_val(2, counted.count, 'to_html call count')


# Unrenderable values.

utest_exc((UnrenderableValue, 'Cannot convert object to HTML'), render, {'foo': 'bar'})
utest_exc(UnrenderableValue, render, 1)
utest_exc(TypeError, render, tag('div', {}, 'ok', object()))
utest_exc(UnrenderableValue, render, Element('div', {}, [set()]))


# Fragments.

utest_seq(['', '<', 'br', '>', ''], render_parts, tag('br'), no_ws)
utest_seq(['', 'a', '\n'], render_parts, 'a', RenderOptions())
utest_seq([], render_parts, None, RenderOptions(doctype='html'))
