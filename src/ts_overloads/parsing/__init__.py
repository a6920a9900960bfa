from ts_overloads.parsing.grammar import SIGNATURE_GRAMMAR
from ts_overloads.parsing.parser import SignatureParser, parse

__all__ = ["SIGNATURE_GRAMMAR", "SignatureParser", "parse"]
