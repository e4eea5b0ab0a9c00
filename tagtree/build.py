# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Constructors for tag tree nodes.
'''

from typing import Any, overload

from .exceptions import InvalidCommentText
from .node import Attrs, Element, is_node, Node, Raw


def is_valid_comment_text(text:str) -> bool:
  'https://html.spec.whatwg.org/multipage/syntax.html#comments'
  return not (
    text.startswith('>') or
    text.startswith('->') or
    '<!--' in text or
    '-->' in text or
    '--!>' in text)


@overload
def tag(tag_name:str, child:Node=None) -> Element: ...
@overload
def tag(tag_name:str, attrs:Attrs|None, *children:Node) -> Element: ...

def tag(tag_name:str, attrs_or_child:Any=None, *children:Node) -> Element:
  '''
  Create an element.

  `tag(name, child)` and `tag(name, attrs, *children)` are both accepted.
  If any trailing `children` are given, the second argument is always the attribute map.
  Otherwise the second argument is the child if it is a node (`None`, str, list, tuple, `Raw`, `Element`, `ToHtml`),
  and the attribute map if it is not.
  The tag name and attributes are validated by `Element`.
  '''
  if children:
    return Element(tag_name, attrs_or_child, children)
  if is_node(attrs_or_child):
    return Element(tag_name, {}, attrs_or_child)
  return Element(tag_name, attrs_or_child)


element = tag


def raw(markup:str) -> Raw:
  'Create a raw node; `markup` is inserted into the output verbatim.'
  return Raw(markup)


def comment(text:str) -> Raw:
  'Create a comment node.'
  if not is_valid_comment_text(text):
    raise InvalidCommentText(f'Invalid comment text: {text!r}')
  return Raw(f'<!-- {text} -->')
