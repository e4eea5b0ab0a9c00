# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML escaping utilities.
'''

from math import isinf, isnan
from typing import Any


def escape(text:str) -> str:
  '''
  Escape `<`, `>`, `&` and `"` in `text`.
  Existing entity references are escaped again; `escape` is not idempotent.
  '''
  text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace('<', '&lt;')
  text = text.replace('>', '&gt;')
  text = text.replace('"', '&quot;')
  return text


def fmt_attr_val(val:Any) -> str:
  '''
  Format a number or string attribute value as text, before escaping.
  Integral floats are rendered as ints, and non-finite floats as `NaN`, `Infinity` and `-Infinity`.
  Other floats use Python's `str`, so exponents are spelled `1.5e-07`.
  '''
  if isinstance(val, float):
    if isnan(val): return 'NaN'
    if isinf(val): return 'Infinity' if val > 0 else '-Infinity'
  return str(prefer_int(val))


def prefer_int(v:Any) -> Any:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer():
    return int(v)
  return v
