#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = sorted(find_tests(args.paths))

  work_dir = getcwd()
  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', work_dir)
  # Tests import the project from the working directory even when it is not installed.
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  utest_cwd = Path('_build/_utest')
  utest_cwd.mkdir(parents=True, exist_ok=True)
  failed:list[Path] = []
  for path in paths:
    print(path)
    c = run([executable, str(path.resolve())], cwd=utest_cwd, env=env).returncode
    if c != 0:
      failed.append(path)
      print()

  if failed:
    print(f'utest: {len(failed)} of {len(paths)} test modules failed:', *failed, sep='\n  ')
  exit(1 if failed else 0)


def find_tests(paths:list[str]) -> list[Path]:
  found:list[Path] = []
  for p in map(Path, paths):
    if p.is_dir(): found.extend(f for f in p.rglob('*.ut.py') if f.is_file())
    elif p.name.endswith('.ut.py'): found.append(p)
    else: exit(f'utest: not a test module or directory: {p}')
  return found


if __name__ == '__main__': main()
