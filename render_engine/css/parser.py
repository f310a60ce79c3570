"""
Style sheet parser.
This module turns style text into rule groups of selectors and typed declarations.

Grammar::

    rule-group    := selector-list "{" declaration* "}"
    selector-list := selector ("," selector)*
    selector      := [tag] ("." class | "#" id | "[" name "=" '"' text '"' "]")*
    declaration   := property ":" value (";" | before "}")
    value         := numeric | color | raw-string

Any structural violation raises ``CSSParseError``; there is no recovery and
no partial result.
"""

import logging
from typing import List, Tuple

from .errors import CSSParseError, ErrorKind
from .scanner import Scanner
from .selector import RuleGroup, Selector
from .values import Color, Declarations, NumericValue, StringValue, Value

logger = logging.getLogger(__name__)

HEX_DIGITS = set("0123456789abcdefABCDEF")


def is_digit(char: str) -> bool:
    """ASCII decimal digit test."""
    return '0' <= char <= '9'


def is_identifier_char(char: str) -> bool:
    """
    Characters allowed in tag, class and id names.

    Identifiers may start with a digit or a dash here; real style sheets
    require a leading letter.
    """
    return char.isalnum() or char in '-_'


class CSSParser:
    """
    Parser for style text.

    A parser instance wraps one input buffer and is consumed by a single
    call to ``parse``.
    """

    def __init__(self, text: str):
        """
        Initialize the parser.

        Args:
            text: Style text to parse
        """
        self.scanner = Scanner(text)

    @classmethod
    def parse_text(cls, text: str) -> List[RuleGroup]:
        """
        Parse style text into rule groups.

        Args:
            text: Style text to parse

        Returns:
            List[RuleGroup]: Rule groups in source order
        """
        return cls(text).parse()

    def parse(self) -> List[RuleGroup]:
        """
        Parse every rule group in the input.

        Returns:
            List[RuleGroup]: Rule groups in source order
        """
        rule_groups = []

        self.scanner.consume_whitespace()
        while not self.scanner.eof():
            rule_groups.append(self.parse_rule_group())
            self.scanner.consume_whitespace()

        logger.debug(f"Parsed {len(rule_groups)} rule groups")
        return rule_groups

    def parse_rule_group(self) -> RuleGroup:
        """Parse ``selector-list { declarations }``."""
        selectors = self.parse_selectors()

        self.scanner.consume_whitespace()
        self.scanner.expect('{')
        self.scanner.consume_whitespace()

        declarations = self.parse_declarations()

        self.scanner.consume_whitespace()
        self.scanner.expect('}')

        return RuleGroup(selectors, declarations)

    def parse_declarations(self) -> Declarations:
        """Parse declarations up to (not including) the closing brace."""
        declarations: Declarations = {}

        while self.scanner.next_char() != '}':
            name, value = self.parse_declaration()
            declarations[name] = value
            self.scanner.consume_whitespace()

        return declarations

    def parse_declaration(self) -> Tuple[str, Value]:
        """Parse ``property: value;`` (the semicolon is optional before ``}``)."""
        start = self.scanner.pos
        name = self.scanner.consume_while(lambda c: c not in ':;{}').strip()
        if not name:
            raise CSSParseError(ErrorKind.EMPTY_IDENTIFIER, start, "missing property name")

        self.scanner.expect(':')
        self.scanner.consume_whitespace()

        value = self.parse_value()

        self.scanner.consume_whitespace()
        # The last declaration in a block may omit its semicolon
        if self.scanner.next_char() != '}':
            self.scanner.expect(';')

        return name, value

    def parse_value(self) -> Value:
        """Dispatch on the first character of a value."""
        char = self.scanner.next_char()

        if is_digit(char):
            return self.parse_numeric_value()

        if char == '#':
            return self.parse_color_value()

        return self.parse_string_value()

    def parse_numeric_value(self) -> NumericValue:
        """
        Parse ``0``, ``N%`` or ``Npx``.

        A zero discards everything up to the next ``;`` or ``}``, so ``0em`` and
        ``0garbage`` are both zero.
        """
        start = self.scanner.pos
        digits = self.scanner.consume_while(is_digit)
        if not digits:
            raise CSSParseError(ErrorKind.UNEXPECTED_CHARACTER, start, "expected a digit")
        number = int(digits)

        if number == 0:
            self.scanner.consume_while(lambda c: c not in ';}')
            return NumericValue.zero()

        if self.scanner.starts_with('%'):
            self.scanner.consume_char()
            return NumericValue.percentage(number)

        if self.scanner.starts_with('px'):
            self.scanner.consume_char()
            self.scanner.consume_char()
            return NumericValue.px(number)

        unit = self.scanner.consume_while(lambda c: c not in '; \t\r\n}')
        raise CSSParseError(ErrorKind.UNKNOWN_UNIT, self.scanner.pos - len(unit),
                            f"unsupported unit {unit!r}")

    def parse_color_value(self) -> Color:
        """Parse ``#rgb`` or ``#rrggbb``."""
        self.scanner.expect('#')
        start = self.scanner.pos
        digits = self.scanner.consume_while(lambda c: c in HEX_DIGITS)

        if len(digits) not in (3, 6):
            raise CSSParseError(ErrorKind.INVALID_COLOR_LENGTH, start,
                                f"expected 3 or 6 hex digits, found {len(digits)}")

        return Color.from_hex(digits)

    def parse_string_value(self) -> StringValue:
        """Take everything up to ``;`` or ``}`` verbatim, trimmed."""
        return StringValue(self.scanner.consume_while(lambda c: c not in ';}').strip())

    def parse_selectors(self) -> List[Selector]:
        """Parse a comma-separated selector list."""
        selectors = [self.parse_selector()]
        self.scanner.consume_whitespace()

        while self.scanner.next_char() == ',':
            self.scanner.consume_char()
            self.scanner.consume_whitespace()
            selectors.append(self.parse_selector())
            self.scanner.consume_whitespace()

        return selectors

    def parse_selector(self) -> Selector:
        """
        Parse one compound selector.

        Whitespace may only trail a selector; whitespace followed by anything
        other than ``,`` or ``{`` would be a descendant combinator, which is
        not supported.
        """
        start = self.scanner.pos
        selector = Selector()

        tag = self.consume_identifier()
        if tag:
            selector = selector.with_tag(tag)

        while not self.scanner.eof() and self.scanner.next_char() not in ',{':
            char = self.scanner.next_char()

            if char == '.':
                self.scanner.consume_char()
                selector = selector.with_class(self.expect_identifier())
            elif char == '#':
                self.scanner.consume_char()
                selector = selector.with_id(self.expect_identifier())
            elif char == '[':
                name, value = self.parse_attribute()
                selector = selector.with_attr(name, value)
            elif char.isspace():
                self.scanner.consume_whitespace()
                if self.scanner.next_char() not in ',{':
                    raise CSSParseError(ErrorKind.UNSUPPORTED_COMBINATOR, self.scanner.pos,
                                        "descendant selectors are not supported")
            else:
                raise CSSParseError(ErrorKind.UNEXPECTED_CHARACTER, self.scanner.pos,
                                    f"unexpected {char!r} in selector")

        if selector.is_empty():
            raise CSSParseError(ErrorKind.EMPTY_SELECTOR, start)

        return selector

    def parse_attribute(self) -> Tuple[str, str]:
        """Parse ``[name="value"]``; whitespace is allowed inside the brackets."""
        self.scanner.expect('[')
        self.scanner.consume_whitespace()

        start = self.scanner.pos
        name = self.scanner.consume_while(lambda c: c not in '=]"' and not c.isspace())
        if not name:
            raise CSSParseError(ErrorKind.EMPTY_IDENTIFIER, start, "missing attribute name")

        self.scanner.consume_whitespace()
        self.scanner.expect('=')
        self.scanner.consume_whitespace()
        self.scanner.expect('"')

        quote = self.scanner.pos - 1
        value = self.scanner.consume_while(lambda c: c != '"')
        if self.scanner.eof():
            raise CSSParseError(ErrorKind.UNTERMINATED_STRING, quote)
        self.scanner.consume_char()

        self.scanner.consume_whitespace()
        self.scanner.expect(']')

        return name, value

    def consume_identifier(self) -> str:
        return self.scanner.consume_while(is_identifier_char)

    def expect_identifier(self) -> str:
        start = self.scanner.pos
        identifier = self.consume_identifier()
        if not identifier:
            raise CSSParseError(ErrorKind.EMPTY_IDENTIFIER, start)
        return identifier


def parse_stylesheet(text: str) -> List[RuleGroup]:
    """
    Parse style text into rule groups.

    Args:
        text: Style text

    Returns:
        List[RuleGroup]: Rule groups in source order

    Raises:
        CSSParseError: On any syntax violation
    """
    return CSSParser.parse_text(text)
