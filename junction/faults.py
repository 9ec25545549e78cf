"""
Junction faults (routing errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for user-facing issues.
  Codes are grouped by domain so logs and searches stay predictable.
- RoutingException: base type that carries message + options and knows how to
  render itself in a friendly, lowercased, and actionable way.
- RoutingFailedError: the only fault the router raises (a command-like token
  that names no registered command).
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: every message includes the ordinal position of the
  offending token (“at first position”).
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The router builds a fault and calls trigger(fault, **options).
- In non-shell mode, exceptions are raised; in shell mode, they are rendered via
  rich on stderr and the process exits with status 1.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the toolkit (stable identifiers).

    grouping
    - routing (1110x)
      • ROUTING_FAILED: a command-like token matched no registered command.

    normalize() lets the host remap codes to custom labels while the numeric
    values stay stable.
    """
    # --- routing errors (11xxx) ---
    ROUTING_FAILED = 11101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class RoutingException(Exception):
    """
    base class for routing faults.

    the message is the one-sentence body; every other piece of context (title,
    code, hint, input, index, suggestions, docs and the rendering switches
    shell/fancy/colorful) travels in the read-only options mapping.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        main = __import__("__main__")
        options = defaultdict(lambda: None, self.options)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if options["colorful"] else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not options["colorful"]:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        code = options["code"]
        prog = text(getattr(main, "__prog__", options["prog"] or "junction"), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else code, styler("code")),
            " | ",
            text((options["title"] or "error").title(), styler("error-title")),
            " ]"
        )
        message = text(str(self), styler("error-message"))
        parts = [message]
        if options["hint"]:
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(options["hint"], styler("hint"))))
        if options["docs"]:
            parts.append(text(options["docs"], styler("hint")))

        if options["fancy"]:
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RoutingFailedError(RoutingException): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see RoutingException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise the fault is raised.

    typical options
    - prog, shell, fancy, colorful, title, code, hint, docs, and any other
      context the reporter may want to show (input/index/suggestions).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings. when
    not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "RoutingException",
    "RoutingFailedError",
    "FaultCode",
    "trigger",
    "getdoc",
)
