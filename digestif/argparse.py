# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import _SubParsersAction, ArgumentParser, ArgumentTypeError, Namespace
from functools import cached_property
from typing import Callable, Sequence


class CommandParser(ArgumentParser):
  '''
  A subclass of ArgumentParser that is intended for configuration with subcommand parsers.
  Use `add_command()` to add subcommands.
  The result of this function is itself a CommandParser due to the way that ArgumentParser implements `add_subparsers`
  and `add_parser`.
  '''

  @cached_property
  def _commands_subparsers(self) -> _SubParsersAction:
    commands = self.add_subparsers(required=True, dest='command', help='Available commands.')
    self.epilog = "For help with a specific command, pass '-h' to that command."
    return commands


  def add_command(self, main_fn:Callable[[Namespace],None], name:str|None=None, **kwargs) -> 'CommandParser':
    '''
    Add a command to the parser.
    By default, `name` will be derived from `main_fn` by removing any 'main_' prefix and replacing underscores with hyphens.
    The first line of the docstring of `main_fn` is used as the default help.
    '''
    if self.get_default('main_fn') is not None:
      raise Exception('CommandParser has a `main_fn` function set; commands cannot be nested under it.')

    if not name:
      name = main_fn.__name__.removeprefix('main_').replace('_', '-')
    if 'help' not in kwargs and main_fn.__doc__:
      kwargs['help'] = main_fn.__doc__.strip().splitlines()[0]

    command = self._commands_subparsers.add_parser(name, **kwargs)
    assert isinstance(command, CommandParser)
    command.set_defaults(main_fn=main_fn)
    return command


  def parse_and_run_command(self, args:Sequence[str]|None=None) -> Namespace:
    '''
    Parse arguments and run the command.
    '''
    ns = self.parse_args(args)
    ns.main_fn(ns)
    return ns


def comma_list(arg:str) -> list[str]:
  '''
  Argument `type` function that splits a comma separated list into stripped words.
  The words are resolved into values by the command, so that unknown names are reported as configuration errors.
  '''
  words = [w.strip() for w in arg.split(',')]
  if not all(words): raise ArgumentTypeError(f'empty element in comma separated list: {arg!r}')
  return words
