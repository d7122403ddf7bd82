# src/codequill/config.py

__version__ = "1.0.0"

IGNORE_FILENAME = ".codequillignore"
DEFAULT_OUTPUT = "codequill-prompt.txt"

# Joins "<path>\n<content>" entries in the output artifact
ENTRY_SEPARATOR = "\n\n---\n\n"

# Substring git prints on stderr outside of a work tree
NOT_A_REPO_MARKER = "not a git repository"

DEFAULT_READ_WORKERS = 8
