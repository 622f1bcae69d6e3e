#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env['PYTHONPATH'] = pathsep.join(p for p in (getcwd(), env.get('PYTHONPATH')) if p) # Make the in-tree `utest` importable.

  ok = True
  for path in find_test_paths(args.paths):
    print(path)
    if run([executable, path], env=env).returncode != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def find_test_paths(roots:list[str]) -> list[str]:
  paths:list[str] = []
  for root in roots:
    if isfile(root):
      paths.append(root)
      continue
    for dir_path, dir_names, file_names in walk(root):
      dir_names.sort()
      paths.extend(path_join(dir_path, n) for n in sorted(file_names) if n.endswith('.ut.py'))
  return paths


if __name__ == '__main__': main()
