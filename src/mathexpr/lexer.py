from functools import reduce
import operator

import regex


class Cursor:
    '''
    Scan position over one expression.

    ``ch`` is the character under the cursor, or NUL once past the end.
    '''
    END = '\0'

    # Integral part of a number. May be empty, as in .5
    INTEGRAL = r'[0-9]*'
    # Fractional part, dot included. A lone dot counts as 0.
    FRACTIONAL = r'(?:\.[0-9]*)?'
    # Exponent. Not part of the literal unless digits follow the e.
    EXPONENT = r'(?:[eE][+-]?[0-9]+)?'
    NUMBER = r'''
              # 1, 1.5, .5, 1., 1e3, 1.5E-3
              (?<number>
                  {INTEGRAL}
                  {FRACTIONAL}
                  {EXPONENT}
              )
              '''.format(INTEGRAL=INTEGRAL,
                         FRACTIONAL=FRACTIONAL,
                         EXPONENT=EXPONENT)
    # Letter or underscore, then any word characters.
    IDENTIFIER = r'''
                  (?<identifier>
                      [^\W\d]
                      \w*
                  )
                  '''
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    NUMBER_RE = regex.compile(NUMBER, flags=FLAGS)
    IDENTIFIER_RE = regex.compile(IDENTIFIER, flags=FLAGS)

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.ch = text[0] if text else self.END

    def at_end(self):
        return self.pos >= len(self.text)

    def advance(self, n=1):
        '''
        Move forward n characters and refresh ``ch``.
        '''
        self.pos += n
        self.ch = self.END if self.at_end() else self.text[self.pos]

    def skip_whitespace(self):
        while not self.at_end() and self.ch.isspace():
            self.advance()

    def consume_if(self, expected):
        '''
        Skip whitespace and consume expected if it's next.

        On a miss, the cursor is left exactly where it was.
        '''
        start = self.pos
        self.skip_whitespace()
        if not self.at_end() and self.ch == expected:
            self.advance()
            return True
        self._rewind(start)
        return False

    def next_operator(self, operators):
        '''
        Skip whitespace, then consume and return the next character if it is
        one of operators. Return None otherwise.
        '''
        self.skip_whitespace()
        if not self.at_end() and self.ch in operators:
            found = self.ch
            self.advance()
            return found
        return None

    def starts_number(self):
        return not self.at_end() and self.ch in '0123456789.'

    def starts_operand(self):
        '''
        Skip whitespace and tell whether an operand can begin here.
        '''
        self.skip_whitespace()
        if self.at_end():
            return False
        return self.ch in '+-(' or self.starts_number() or \
            type(self).IDENTIFIER_RE.match(self.text, self.pos) is not None

    def scan_number(self):
        '''
        Consume a floating-point literal and return its value.
        '''
        literal = self._scan(type(self).NUMBER_RE, 'number')
        if literal.startswith('.'):
            literal = '0' + literal
        return float(literal)

    def scan_identifier(self):
        '''
        Consume an identifier and return it, or None if there isn't one here.
        '''
        if self.at_end():
            return None
        return self._scan(type(self).IDENTIFIER_RE, 'identifier')

    def _scan(self, pattern, group):
        match = pattern.match(self.text, self.pos)
        if match is None:
            return None
        lexeme = match.group(group)
        self.advance(len(lexeme))
        return lexeme

    def _rewind(self, pos):
        self.pos = pos
        self.ch = self.END if self.at_end() else self.text[self.pos]

    def current(self):
        '''
        Current character for error reporting, None at the end.
        '''
        return None if self.at_end() else self.ch
