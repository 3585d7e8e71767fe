"""
Word boundary tokenizer, case conversion and English pluralization 🔤.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('casework')

# relative
from . import string
from .string import (Case, camel_case, capitalize, change_separator, convert,
                     decapitalize, headline, is_boundary, is_valid_word,
                     kebab_case, numbered, pascal_case, pluralise, pluralize,
                     singularise, singularize, snake_case, split_words,
                     to_camel_case, to_headline, to_kebab_case, to_pascal_case,
                     to_snake_case, tokenize, words)


# ---------------------------------------------------------------------------- #

# version
__version__ = version('casework')
