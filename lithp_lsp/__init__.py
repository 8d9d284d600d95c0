"""lithp Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server that treats each document line as one REPL
  input and reports parse failures and error values as diagnostics.
- A simple TCP REPL server to evaluate lines via the Interpreter.
"""

__all__ = [
    "server",
    "repl_server",
]
