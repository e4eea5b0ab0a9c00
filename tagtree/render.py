# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render tag trees to HTML source.
'''

from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator

from .escape import escape, fmt_attr_val
from .exceptions import UnrenderableValue
from .node import AttrValue, Element, is_empty_node, Node, node_kind, NodeKind, Raw
from .semantics import raw_text_tags, void_tags


@dataclass(frozen=True)
class RenderOptions:
  indent_level:int = 0 # Indentation level of the root node.
  raw_text:bool = False # Emit text without escaping.
  indent_text:str = '  ' # Text repeated once per indentation level.
  insert_newlines:bool = True # Insert a newline at the end of each item.
  doctype:str|None = None # Doctype declaration, emitted by `render` only.

  @property
  def nl(self) -> str: return '\n' if self.insert_newlines else ''

  @property
  def indent(self) -> str: return self.indent_text * self.indent_level


def render(node:Node, options:RenderOptions|None=None, **kwargs:Any) -> str:
  '''
  Render a tag tree into HTML source.

  Options are given either as a `RenderOptions` instance or as keyword arguments;
  keyword arguments override the corresponding fields of `options`.

  Features:
  * void elements are not closed;
  * boolean attributes are omitted if false;
  * text inside raw text elements is not escaped;
  * empty nodes are ignored.

  Rendering is recursive with two frames per element level,
  so trees nested deeper than about 450 elements exceed the default recursion limit and raise `RecursionError`.

  filename: `examples/projects.py`
  ```py
  # Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

  # Render a complete page: doctype, head with meta, title and style, and a body with a list of links.

  from textwrap import dedent

  from tagtree import Node, render, tag


  title = 'Cool Projects'

  projects = [
    ('Python', 'https://www.python.org/'),
    ('CPython', 'https://github.com/python/cpython'),
  ]

  css_rules = [
    '* { --py-blue: #3776ab; }',
    'body { font-family: sans-serif; line-height: 1.6; }',
    'li > a { color: var(--py-blue); text-decoration: none; }',
  ]


  def list_of(items:list[Node]) -> Node:
    return tag('ul', [tag('li', item) for item in items])


  def link(title:str, url:str) -> Node:
    return tag('a', {'href': url}, title)


  result = render(
    tag('html', {'lang': 'en'}, [
      tag('head', [
        tag('meta', {'charset': 'utf-8'}),
        tag('title', title),
        tag('style', css_rules),
      ]),
      tag('body', [
        tag('h1', title),
        list_of([link(t, url) for t, url in projects]),
      ]),
    ]),
    doctype='html',
  )

  assert result == dedent("""
    <!doctype html>
    <html lang="en">
      <head>
        <meta charset="utf-8">
        <title>
          Cool Projects
        </title>
        <style>
          * { --py-blue: #3776ab; }
          body { font-family: sans-serif; line-height: 1.6; }
          li > a { color: var(--py-blue); text-decoration: none; }
        </style>
      </head>
      <body>
        <h1>
          Cool Projects
        </h1>
        <ul>
          <li>
            <a href="https://www.python.org/">
              Python
            </a>
          </li>
          <li>
            <a href="https://github.com/python/cpython">
              CPython
            </a>
          </li>
        </ul>
      </body>
    </html>
  """)[1:], result
  ```
  '''
  if options is None: options = RenderOptions(**kwargs)
  elif kwargs: options = replace(options, **kwargs)
  # The parts are joined only after the whole tree renders, so an error never yields partial output.
  parts = list(render_parts(node, options))
  first_line = f'<!doctype {options.doctype}>\n' if options.doctype else ''
  return first_line + ''.join(parts)


def render_parts(node:Node, options:RenderOptions) -> Iterator[str]:
  'Render the tree as a stream of string fragments. The doctype option is ignored.'
  return _render(node, node_kind(node), options)


def _render(node:Any, kind:NodeKind, options:RenderOptions) -> Iterator[str]:
  'Recursive helper to `render_parts`.'
  match kind:
    case NodeKind.EMPTY:
      return
    case NodeKind.TEXT:
      # Text equal to the name of a raw text tag is never escaped, even outside of a raw text element.
      if options.raw_text or node in raw_text_tags:
        yield from (options.indent, node, options.nl)
      else:
        yield from (options.indent, escape(node), options.nl)
    case NodeKind.SEQ:
      for child in node:
        yield from _render(child, node_kind(child), options)
    case NodeKind.RAW:
      assert isinstance(node, Raw)
      yield from (options.indent, node.markup, options.nl)
    case NodeKind.ELEMENT:
      yield from _render_element(node, options)
    case NodeKind.TO_HTML:
      resolved = node.to_html() # Not cached; a shared object is resolved each time it is rendered.
      yield from _render(resolved, node_kind(resolved), options)
    case NodeKind.INVALID:
      raise UnrenderableValue(f'Cannot convert object to HTML: {node!r}')


def _render_element(el:Element, options:RenderOptions) -> Iterator[str]:
  indent = options.indent
  nl = options.nl
  yield from (indent, '<', el.tag)
  yield from fmt_attr_items(el.attrs.items())
  if is_empty_node(el.child):
    if el.tag in void_tags:
      yield from ('>', nl)
    else:
      yield from ('>', '</', el.tag, '>', nl)
    return
  yield from ('>', nl)
  child_options = RenderOptions(
    indent_level=options.indent_level + 1,
    raw_text=(el.tag in raw_text_tags),
    indent_text=options.indent_text,
    insert_newlines=options.insert_newlines)
  yield from _render(el.child, el.child_kind, child_options)
  yield from (indent, '</', el.tag, '>', nl)


def fmt_attr_items(items:Iterable[tuple[str,AttrValue]]) -> Iterator[str]:
  'Yield the formatted attribute fragments, each with a leading space.'
  for k, v in items:
    if v is None or v is False: continue
    if v is True:
      yield from (' ', k)
    else:
      yield from (' ', k, '="', escape(fmt_attr_val(v)), '"')
