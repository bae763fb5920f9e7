"""Transit order optimizer: best visiting order over walk, transit and rail."""

__version__ = "0.1.0"
