"""Interactive mode for the Lox interpreter. Uses cmd as backend."""

import cmd

from .interpreter import Interpreter, run_source


class Shell(cmd.Cmd):
    """Lox interpreter shell. Globals persist from one line to the next."""
    intro = "Lox interpreter :: Python backend\nType 'help' for more information, 'exit' to quit."
    prompt = "> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter

    def onecmd(self, line):
        """Bare 'help' and 'exit' are commands; any other line is Lox."""
        command = line.strip()
        if not command:
            return self.emptyline()
        if command in ('help', 'exit', 'EOF'):
            return super().onecmd(command)
        return self.default(line)

    def default(self, line):
        """Executes an arbitrary line of Lox."""
        run_source(line, interpreter=self.interpreter)
        # error flags are per line
        self.interpreter.reporter.reset()

    def do_help(self, arg):
        """Short usage note instead of per-command docs."""
        print("Type Lox statements, e.g. 'var a = 1;' then 'print a + 2;'.\n"
              "Variables declared at the prompt stay defined for the rest of the session.")

    def emptyline(self):
        """Blank input does nothing."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
