"""
Junction token store: raw command-line tokens and their roles.

What this module provides
- Role: the category a token has been assigned (program name, command name,
  option, or still unassigned).
- Token: one raw argument string plus its role; the value never changes and
  the role only ever leaves UNASSIGNED once.
- Tokens: the ordered store for a single invocation. It owns every Token and
  is the only place roles are mutated.

Tokenizing
- Tokens.parse() splits a single command-line string on whitespace, keeping
  double-quoted spans (quotes stripped) as one token:
      'tester add "buy milk" -p 1'  →  ['tester', 'add', 'buy milk', '-p', '1']
- Tokens.join() goes the other way, quoting values that need it.

Lifecycle
- Built once per invocation, index 0 tagged PROGRAM_NAME.
- The router tags at most one token COMMAND_NAME; what stays UNASSIGNED is
  handed to the selected command via unassigned().
"""
import re
import sys
from collections.abc import Iterable
from enum import Enum

from .utils import Unset, coalesce

_PATTERN = re.compile(r'"(?P<quoted>[^"]*)"|(?P<bare>[^"\s]+)')


class Role(Enum):
    """role of a raw token within one invocation."""
    UNASSIGNED = "unassigned"
    PROGRAM_NAME = "program-name"
    COMMAND_NAME = "command-name"
    OPTION = "option"


class Token:
    """
    a raw token value plus its classification role.

    value is read-only. role is written by the owning Tokens store only, and
    a token that has left UNASSIGNED keeps its role for the rest of the run.
    """
    __slots__ = ("_value", "_role")

    def __init__(self, value, role=Role.UNASSIGNED, /):
        if not isinstance(value, str):
            raise TypeError("token value must be a string")
        if not isinstance(role, Role):
            raise TypeError("token role must be a role")
        self._value = value
        self._role = role

    @property
    def value(self):
        return self._value

    @property
    def role(self):
        return self._role

    @property
    def unassigned(self):
        return self._role is Role.UNASSIGNED

    def __repr__(self):
        return f"token({self._value!r}, {self._role.value})"

    def __rich_repr__(self):
        yield self._value
        yield "role", self._role.value


class Tokens:
    """
    Ordered store of raw tokens for a single invocation.

    Construction
    - Tokens(arguments): explicit ordered iterable of strings.
    - Tokens(): the current process arguments (sys.argv).
    - Tokens.parse(string): tokenize a command-line string first.

    Invariants
    - position 0, when present, is PROGRAM_NAME from construction on.
    - length and values are fixed; only roles change, through classify() and
      classify_at().

    Queries
    - unassigned(): values still UNASSIGNED, in order.
    - first_of_role(role): value of the lowest-index token with that role.
    - following(value): value right after the first occurrence of value.
    Missing results are None.
    """

    def __init__(self, arguments=Unset, /):
        arguments = coalesce(arguments, sys.argv)
        if isinstance(arguments, str) or not isinstance(arguments, Iterable):
            raise TypeError("tokens argument must be an iterable of strings")

        self._tokens = []
        for argument in arguments:
            if not isinstance(argument, str):
                raise TypeError("tokens argument must be an iterable of strings")
            self._tokens.append(Token(argument))

        if self._tokens:
            self.classify_at(0, Role.PROGRAM_NAME)

    @classmethod
    def parse(cls, string, /):
        """
        Build a store from a single command-line string.

        Whitespace separates tokens outside double quotes; a quoted span is
        one token with the quotes stripped, embedded whitespace included. A
        stray quote never joins anything: it is skipped like whitespace.
        """
        if not isinstance(string, str):
            raise TypeError("parse() argument must be a string")
        return cls([
            match["bare"] if match["quoted"] is None else match["quoted"]
            for match in _PATTERN.finditer(string)
        ])

    @staticmethod
    def join(values, /):
        """
        Rebuild a command-line string that parse() splits back into values.

        Values that are empty or contain whitespace are double-quoted. Values
        containing a double quote cannot be represented and raise ValueError.
        """
        if isinstance(values, str) or not isinstance(values, Iterable):
            raise TypeError("join() argument must be an iterable of strings")
        parts = []
        for value in values:
            if not isinstance(value, str):
                raise TypeError("join() argument must be an iterable of strings")
            if '"' in value:
                raise ValueError("join() cannot represent a value containing '\"'")
            parts.append(f'"{value}"' if not value or re.search(r"\s", value) else value)
        return " ".join(parts)

    def classify(self, value, role, /):
        """
        Assign role to the first still-unassigned token equal to value.

        Absent values are ignored, so callers may classify speculatively.
        Repeated values are claimed one per call, left to right.
        """
        for index, token in enumerate(self._tokens):
            if token.value == value and token.unassigned:
                self.classify_at(index, role)
                return

    def classify_at(self, index, role, /):
        """
        Assign role to the token at index.

        Roles are one-way: a token that already left UNASSIGNED raises
        ValueError and keeps its role.
        """
        if not isinstance(role, Role):
            raise TypeError("classify_at() second argument must be a role")
        token = self._tokens[index]
        if not token.unassigned:
            raise ValueError("classify_at() token %r is already classified" % token.value)
        token._role = role

    def unassigned(self):
        return [token.value for token in self._tokens if token.unassigned]

    def first_of_role(self, role, /):
        for token in self._tokens:
            if token.role is role:
                return token.value
        return None

    def following(self, value, /):
        """
        Return the value after the first occurrence of value, regardless of
        roles; None when value is missing or is the last token.
        """
        for index, token in enumerate(self._tokens[:-1]):
            if token.value == value:
                return self._tokens[index + 1].value
        return None

    def roles(self):
        return tuple((token.value, token.role) for token in self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter([token.value for token in self._tokens])

    def __repr__(self):
        return "tokens(%r)" % [token.value for token in self._tokens]

    def __rich_repr__(self):
        for token in self._tokens:
            yield token.value, token.role.value


__all__ = (
    "Role",
    "Token",
    "Tokens",
)
