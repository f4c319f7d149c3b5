'''
Locale-independent number parsing and formatting.

Both directions are plain functions over module-level patterns, so the
text written out for an operand always reads back as the same float.
'''

from functools import reduce
import operator
import math

import regex


# Integral part of a number
INTEGRAL = r'''
            # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
            (?:
                # 1, 12, or the 1 in 1_200.
                \d{1,3}
                (?:
                    # The 4, 45, etc. in 1234, 12345, etc.
                    \d
                    |
                    # Support not just digits, but thousands separators
                    (?:
                        _\d{3}
                    )
                )*
            )
            '''
# Fractional part of a number
FRACTIONAL = r'''
              (?:
                  \d+
                  (?:
                      _\d+
                  )*
              )
              '''
# Unsigned number, as typed interactively.
NUMBER = r'''
          (?:
              # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
              {INTEGRAL}
              (?:
                  \.
                  {FRACTIONAL}?
              )?
          )|(?:
              # .2, 0.2, 0.200_200
              {INTEGRAL}?
              \.
              {FRACTIONAL}
          )
          '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)
# Everything format_number() can produce: sign, exponent, non-finites.
LITERAL = r'''
           [+-]?
           (?:
               (?:
                   (?:{NUMBER})
                   (?:
                       [eE][+-]?\d+
                   )?
               )
               |
               inf
               |
               nan
           )
           '''.format(NUMBER=NUMBER)

FLAGS = reduce(operator.__or__,
               {regex.VERSION1,
                regex.VERBOSE},
               0)

_LITERAL = regex.compile(LITERAL, flags=FLAGS)

# Beyond this, floats stop being exact integers and %d would invent digits.
_EXACT_LIMIT = 1e16


def parse_number(text):
    '''
    Parse text into a float, or None if it isn't a number literal.
    '''
    if _LITERAL.fullmatch(text) is None:
        return None
    return float(text.replace('_', ''))


def format_number(value):
    '''
    Render a float as the shortest text that parses back to it.

    Whole numbers lose their trailing ".0", so 3.0 reads "3". Negative zero
    keeps its sign: "-0.0".
    '''
    value = float(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return repr(value)
    if math.isfinite(value) and value.is_integer() \
       and abs(value) < _EXACT_LIMIT:
        return '%d' % value
    return repr(value)
