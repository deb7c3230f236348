"""Naming helpers for generated Scala code."""

# Scala 2 reserved words that must be back-quoted when used as identifiers
SCALA_KEYWORDS = {
    'abstract', 'case', 'catch', 'class', 'def', 'do', 'else', 'extends',
    'false', 'final', 'finally', 'for', 'forSome', 'if', 'implicit',
    'import', 'lazy', 'macro', 'match', 'new', 'null', 'object', 'override',
    'package', 'private', 'protected', 'return', 'sealed', 'super', 'this',
    'throw', 'trait', 'true', 'try', 'type', 'val', 'var', 'while', 'with',
    'yield', '_'
}


def safe_name(name: str) -> str:
    """Make a name safe for Scala by back-quoting reserved words."""
    if name in SCALA_KEYWORDS:
        return f"`{name}`"
    return name


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def args_type_name(field_name: str) -> str:
    """Name of the record holding a field's arguments, e.g. ``user`` -> ``UserArgs``."""
    return f"{capitalize(field_name)}Args"


_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def _escape(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ord(ch) < 0x20:
        return f"\\u{ord(ch):04x}"
    return ch


def scala_string(text: str) -> str:
    """Quote text as a Scala string literal."""
    return '"' + "".join(_escape(ch) for ch in text) + '"'
