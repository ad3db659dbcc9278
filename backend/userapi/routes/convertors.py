"""
Users API Backend - Path Convertors
====================================

What:  A `{name:digits}` path convertor for user id segments.
Why:   Ids must be one or more decimal digits. Anything else should fail to
       route (framework 404) rather than reach the handler. Starlette's
       built-in `int` convertor has the right pattern but converts to int,
       which would make "007" match user 7; this one keeps the raw string.
"""

from starlette.convertors import Convertor, register_url_convertor


class DigitsConvertor(Convertor):
    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"Not a digit string: {value!r}")
        return value


register_url_convertor("digits", DigitsConvertor())
