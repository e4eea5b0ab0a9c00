# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML semantics data.
'''

import re


# Text content of these elements is emitted without escaping.
raw_text_tags = frozenset({
  'script',
  'style',
  'textarea',
  'title',
})

# Void elements have no content and no closing tag.
void_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'embed',
  'hr',
  'img',
  'input',
  'link',
  'meta',
  'source',
  'track',
  'wbr',
})


# XML tag names are case-sensitive, while HTML tag names are case-insensitive.
# Colons are allowed for XML namespaces, although they are rarely used in HTML.
name_re = re.compile(r'[A-Za-z_:][A-Za-z0-9_:.\-]*') # ASCII letters only.
