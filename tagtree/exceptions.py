# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while building and rendering tag trees.
'''


class TagTreeError(Exception):
  'Base class for all tagtree errors.'


class InvalidTagName(TagTreeError, ValueError):
  'Raised when a tag name does not match the name pattern.'


class InvalidAttrName(TagTreeError, ValueError):
  'Raised when an attribute name does not match the name pattern.'


class InvalidAttrValue(TagTreeError, TypeError):
  '''
  Raised when an attribute value is not a str, int, float, bool, or None.
  Objects are rejected even if they define `__str__`.
  '''


class InvalidAttrs(TagTreeError, TypeError):
  'Raised when an attribute map is required but the argument is not a mapping.'


class InvalidCommentText(TagTreeError, ValueError):
  'Raised when comment text would terminate the comment early or otherwise produce invalid comment syntax.'


class UnrenderableValue(TagTreeError, TypeError):
  'Raised by the renderer for a value that is neither a node nor a `ToHtml` instance.'
