# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tagtree` builds HTML as a tree of immutable nodes and renders it to source text,
escaping text and attribute values, omitting closing tags for void elements,
and leaving the content of raw text elements (script, style, title, textarea) unescaped.
'''

from .build import comment, element, is_valid_comment_text, raw, tag
from .escape import escape
from .exceptions import (InvalidAttrName, InvalidAttrs, InvalidAttrValue, InvalidCommentText, InvalidTagName, TagTreeError,
  UnrenderableValue)
from .node import (Attrs, AttrValue, Element, freeze_node, is_empty_node, is_node, is_valid_attr_name, is_valid_tag_name, Node,
  node_kind, NodeKind, parse_attr_value, parse_attrs, Raw, ToHtml)
from .render import render, render_parts, RenderOptions
from .semantics import raw_text_tags, void_tags
