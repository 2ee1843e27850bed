"""git-credential-sapiens: a git credential helper.

Git invokes the helper to ``get``, ``store`` and ``erase`` saved credentials
for remote hosts. Host providers turn git's input into storage keys, and
credential stores (OS keyring, encrypted file, memory) persist them.
"""

__version__ = "0.1.0"
