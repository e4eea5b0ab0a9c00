#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from pathlib import Path
from sys import stderr
from typing import Any


root = Path(__file__).parent.parent

start_marker = '''\
  filename: `examples/projects.py`
  ```py
'''
end_marker = '  ```\n'


def main() -> None:
  arg_parser = ArgumentParser(description='Embed the example script into the `render` docstring.')
  arg_parser.add_argument('-example', default=str(root/'examples/projects.py'), help='path to the example script.')
  arg_parser.add_argument('-target', default=str(root/'tagtree/render.py'), help='path to the module to rewrite.')
  arg_parser.add_argument('-check', action='store_true', help='do not write; exit with status 1 if the target is out of date.')
  args = arg_parser.parse_args()

  example = Path(args.example).read_text().strip()
  if "'''" in example or '\\' in example:
    exit(f'error: {args.example}: example cannot contain triple single quotes or backslashes.')

  target = Path(args.target)
  source = target.read_text()
  updated = embed(source, example)
  if updated == source:
    errL(f'{target}: up to date.')
    return
  if args.check:
    errL(f'{target}: out of date.')
    exit(1)
  target.write_text(updated)
  errL(f'{target}: updated.')


def embed(source:str, example:str) -> str:
  'Replace the text between the start and end markers in `source` with `example`, indented to match the docstring.'
  start = source.find(start_marker)
  if start == -1: exit('error: start marker not found.')
  body_start = start + len(start_marker)
  end = source.find(end_marker, body_start)
  if end == -1: exit('error: end marker not found.')
  indented = ''.join(f'  {line}\n' if line else '\n' for line in example.split('\n'))
  return source[:body_start] + indented + source[end:]


def errL(*items:Any) -> None: print(*items, sep='', file=stderr)


if __name__ == '__main__': main()
