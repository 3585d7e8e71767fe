"""
Tokenize, recase and inflect words.
"""

from .affixes import has_suffix, remove_suffix, replace_suffix
from .words import (change_separator, is_boundary, is_valid_word, split_words,
                    tokenize, words)
from .casing import (Case, camel_case, capitalize, convert, decapitalize,
                     headline, kebab_case, pascal_case, snake_case,
                     to_camel_case, to_headline, to_kebab_case, to_pascal_case,
                     to_snake_case)
from .plurals import (naive_english_plural, naive_english_singular, numbered,
                      pluralise, pluralize, singularise, singularize)
