# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The tag tree node model.

A `Node` is one of:
* `None`: no content;
* `str`: text, escaped when rendered;
* a `list` or `tuple` of nodes;
* `Raw`: markup inserted verbatim;
* `Element`: a tag with attributes and a single child node;
* `ToHtml`: any object that produces a node on demand.

Nodes are immutable once built, so a node can be shared by multiple parents.
'''

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from .exceptions import InvalidAttrName, InvalidAttrs, InvalidAttrValue, InvalidTagName
from .semantics import name_re


AttrValue = Union[str,int,float,bool,None]
Attrs = Mapping[str,AttrValue]

Node = Union['Element','Raw','ToHtml',str,None,list['Node'],tuple['Node',...]]


def is_valid_tag_name(name:Any) -> bool:
  return isinstance(name, str) and bool(name_re.fullmatch(name))


def is_valid_attr_name(name:Any) -> bool:
  return isinstance(name, str) and bool(name_re.fullmatch(name))


def parse_attr_value(val:Any) -> AttrValue:
  'Only primitive values are allowed; objects with a custom `__str__` are rejected.'
  if val is None or isinstance(val, (str, bool, int, float)):
    return val
  raise InvalidAttrValue(f'Invalid attribute value: {val!r}')


def parse_attrs(attrs:Any) -> dict[str,AttrValue]:
  'Validate `attrs` and return a copy. `None` is treated as an empty mapping.'
  if attrs is None: return {}
  if not isinstance(attrs, Mapping):
    raise InvalidAttrs(f'Invalid attributes; expected a mapping: {attrs!r}')
  parsed:dict[str,AttrValue] = {}
  for k, v in attrs.items():
    if not is_valid_attr_name(k):
      raise InvalidAttrName(f'Invalid attribute name: {k!r}')
    parsed[k] = parse_attr_value(v)
  return parsed


class ToHtml(metaclass=ABCMeta):
  '''
  Interface for objects that can be converted to a node.
  Subclasses implement `to_html`, which the renderer calls each time the object is rendered.
  '''

  @abstractmethod
  def to_html(self) -> Node: ...


@dataclass(frozen=True)
class Raw:
  'Markup that is inserted verbatim into the output, bypassing escaping.'
  markup:str


class NodeKind(Enum):
  'Discriminant for the node sum type.'
  EMPTY = 'empty'
  TEXT = 'text'
  SEQ = 'seq'
  RAW = 'raw'
  ELEMENT = 'element'
  TO_HTML = 'to_html'
  INVALID = 'invalid'


def node_kind(node:Any) -> NodeKind:
  'Classify `node`. Values that are not nodes are classified as `INVALID` rather than raising.'
  if node is None: return NodeKind.EMPTY
  if isinstance(node, str): return NodeKind.TEXT
  if isinstance(node, (list, tuple)): return NodeKind.SEQ
  if isinstance(node, Raw): return NodeKind.RAW
  if isinstance(node, Element): return NodeKind.ELEMENT
  if isinstance(node, ToHtml): return NodeKind.TO_HTML
  return NodeKind.INVALID


def is_node(val:Any) -> bool: return node_kind(val) is not NodeKind.INVALID


def is_empty_node(node:Node) -> bool:
  'True for `None`, the empty string, and empty sequences.'
  return node is None or node == '' or (isinstance(node, (list, tuple)) and len(node) == 0)


def freeze_node(node:Any) -> Any:
  '''
  Return `node` with every nested `list` converted to a `tuple`.
  Other values, including values that are not nodes, are returned unchanged;
  those are reported by the renderer.
  '''
  if isinstance(node, (list, tuple)):
    return tuple(freeze_node(c) for c in node)
  return node


@dataclass(frozen=True)
class Element:
  '''
  An HTML element.
  The tag name and attributes are validated on construction, whether called directly or through `tagtree.tag`.
  `attrs` is copied into a read-only mapping and list children are frozen into tuples.
  '''
  tag:str
  attrs:Attrs = field(default_factory=lambda: MappingProxyType({}))
  child:Node = None
  child_kind:NodeKind = field(init=False, repr=False, compare=False)

  def __post_init__(self) -> None:
    if not is_valid_tag_name(self.tag):
      raise InvalidTagName(f'Invalid tag name: {self.tag!r}')
    object.__setattr__(self, 'attrs', MappingProxyType(parse_attrs(self.attrs))) # Copy so that the caller's dict cannot alias.
    object.__setattr__(self, 'child', freeze_node(self.child))
    object.__setattr__(self, 'child_kind', node_kind(self.child))

  def __hash__(self) -> int:
    return hash((self.tag, frozenset(self.attrs.items()), self.child))

  @property
  def is_empty(self) -> bool: return is_empty_node(self.child)
