"""CI gate that blocks a pull request while a reviewer's comments are unresolved."""

__version__ = "0.1.0"
