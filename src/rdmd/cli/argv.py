"""
Argv preprocessor for the rdmd command.

Click consumes the first bare ``--`` it sees, so ``rdmd -O -- app.d``
would reach the core parser as ``-O app.d``. A leading ``--`` makes Click
stop option processing immediately and hand over every token verbatim:

- ``rdmd -O -- app.d`` → ``rdmd -- -O -- app.d``
"""


def preprocess_argv(argv: list[str]) -> list[str]:
    """Protect the raw arguments from Click's own option handling."""
    return ["--", *argv]
