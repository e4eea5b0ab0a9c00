# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
utest is a tiny unit testing library.

Test scripts call the `utest` functions at module level.
Failures are reported to stderr as they occur;
at exit, if any test failed, a summary is printed and the process exits with status 1.
'''

import atexit as _atexit
import inspect as _inspect
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, Iterable


__all__ = [
  'utest',
  'utest_exc',
  'utest_seq',
  'utest_val',
]


_utest_test_count = 0
_utest_failure_count = 0


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception does not match `exp_exc`.
  See `_compare_exceptions` for the accepted forms of `exp_exc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except Exception as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Iterable[Any], fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`, and convert the resulting iterable into a list.
  Log a test failure if an exception is raised,
  or if any items of the returned sequence do not equal the items of `exp_seq`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  exp = list(exp_seq) # Convert to a list for referential isolation and consistent string repr.
  try: ret = list(fn(*args, **kwargs))
  except Exception as exc:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    return
  if exp != ret:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, ret_label='sequence', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val != act_val:
    _utest_failure(depth=0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def _utest_failure(depth:int, exp_label:str, exp:Any, ret_label:str|None=None, ret:Any=None, exc:BaseException|None=None,
 subj:Any=None, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  assert subj is not None
  _utest_failure_count += 1

  frame_record = _inspect.stack()[2 + depth] # Caller of caller.
  info = _inspect.getframeinfo(frame_record[0])

  try: name = subj.__qualname__
  except AttributeError: name = str(subj)

  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for k, v in kwargs.items():
    _errL(f'  arg {k} = {v!r}')

  _errL(f'  expected {exp_label}: {exp!r}')
  if exc is None: # Unexpected value.
    _errL(f'  returned {ret_label}: {ret!r}')
  else: # Unexpected exception.
    _errL(f'  raised exception: {exc!r}')
    _errL()
    _print_exception(exc, file=_stderr)
  _errL()


def _compare_exceptions(exp:Any, act:BaseException) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  Since Python exceptions do not implement value equality, we offer several methods of comparison:
  * if `exp` is a string, then compare it to the repr of `act`.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * if `exp` is a (type, string) pair, then test the type and that the string occurs in the message of `act`.
  * otherwise, compare the types and args of `act` to `exp`.
  '''
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  if isinstance(exp, tuple):
    exp_type, exp_msg = exp
    return isinstance(act, exp_type) and exp_msg in str(act)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
