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
