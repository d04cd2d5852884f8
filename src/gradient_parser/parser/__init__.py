from gradient_parser.parser.errors import ParseError
from gradient_parser.parser.grammar import GradientParser, parse
from gradient_parser.parser.scanner import Scanner

__all__ = ["ParseError", "GradientParser", "Scanner", "parse"]
