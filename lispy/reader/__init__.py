from lispy.reader.parser import AstNode, lex, parse, parse_file, TokenStream
from lispy.reader.reader import read, read_program

__all__ = ["AstNode", "lex", "parse", "parse_file", "TokenStream", "read", "read_program"]
