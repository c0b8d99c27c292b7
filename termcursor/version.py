__version__ = "0.1.0"

_doc = "Stateful ANSI escape sequence writer for terminal cursor control."
_author = "termcursor authors and contributors"
_license = "LGPLv3"
_url = ""
