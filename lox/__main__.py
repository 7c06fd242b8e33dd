"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [program_file]
    python -m lox [-v...] --emit-ast <program_file>
    python -m lox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a program file an interactive prompt is started. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.

Exit status: 65 when the source has scan or parse errors, 70 when a
runtime error stopped the program, 1 when the input file is missing.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast import Program
from .ast_json import ast_to_obj, ast_from_obj
from .interpreter import Interpreter, run_file
from .parser import parse_source
from .reporter import ErrorReporter
from .shell import Shell

EXIT_STATIC_ERROR = 65
EXIT_RUNTIME_ERROR = 70


def require_file(path: Path) -> Path:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    return path


def read_source(path: Path) -> str:
    require_file(path)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Lox program file (.lox) to execute')
    args = parser.parse_args(argv)

    reporter = ErrorReporter(color=sys.stderr.isatty())

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        statements = parse_source(read_source(program_file), reporter)
        if reporter.had_error:
            sys.exit(EXIT_STATIC_ERROR)
        obj = ast_to_obj(Program(statements))
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        try:
            program = ast_from_obj(json.loads(read_source(ast_path)))
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(EXIT_STATIC_ERROR)
        with Interpreter(reporter=reporter, debug_level=args.v) as interpreter:
            ok = interpreter.run(program)
        if not ok:
            sys.exit(EXIT_RUNTIME_ERROR)
        return

    # No file: interactive prompt
    if not args.program:
        with Interpreter(reporter=reporter, debug_level=args.v) as interpreter:
            Shell(interpreter).cmdloop()
        return

    # Default: execute source file
    program_file = require_file(Path(args.program))
    ok = run_file(str(program_file), reporter=reporter, debug_level=args.v)
    if reporter.had_error:
        sys.exit(EXIT_STATIC_ERROR)
    if not ok:
        sys.exit(EXIT_RUNTIME_ERROR)


if __name__ == '__main__':
    main()
