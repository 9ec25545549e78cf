"""
Junction command descriptors: what the router chooses between.

What this module provides
- Command: wraps a Python callable under a name and an optional shortcut.
  Calling a Command hands it the leftover argument list the router left
  unassigned; parsing those arguments is the command's own business.
- command(...): create a Command, or a decorator that produces one.

Routing surface
- The router only reads two attributes: name (str) and shortcut (str | None).
  Any object exposing them can be routed, Command is just the stock flavor.

Quick start
    from junction import command, invoke

    @command(shortcut="-l")
    def listing(arguments):
        "list the entries"
        print(arguments)

    @command
    def default(arguments):
        print("usage: todo [listing | -l] ...")

    if __name__ == "__main__":
        invoke([listing], default)

Notes
- Names are case-sensitive, non-empty and whitespace-free.
- Shortcuts are flag-like tokens (“-l”), so they must start with '-'.
- Uniqueness across a registry is not checked here; the router picks the first
  match in registration order.
"""
import inspect
import re

from .utils import Unset, coalesce, rename


class Command:
    """
    Named, optionally shortcut-addressable command bound to a callback.

    Parameters
    - callback: Callable[[list[str]], Any]
      Receives the leftover (unassigned) argument values.
    - name: str | Unset
      Routing name; defaults to callback.__name__.
    - shortcut: str | Unset
      Flag-like alias (e.g. "-b"); absent when Unset.
    - descr: str | Unset
      Short description; defaults to the callback docstring.

    Raises
    - TypeError when callback is not callable or metadata has the wrong type.
    - ValueError when name or shortcut are malformed.
    """
    __slots__ = ("_callback", "_name", "_shortcut", "_descr")

    def __init__(self, callback, /, name=Unset, shortcut=Unset, descr=Unset):
        if not callable(callback):
            raise TypeError("command 'callback' must be callable")

        name = coalesce(name, getattr(callback, "__name__", Unset))
        if not isinstance(name, str):
            raise TypeError("command 'name' must be a string")
        if not name or re.search(r"\s", name):
            raise ValueError("command 'name' must be a non-empty string without whitespace")
        if name.startswith("-"):
            raise ValueError("command 'name' must not start with '-'")

        if shortcut is not Unset:
            if not isinstance(shortcut, str):
                raise TypeError("command 'shortcut' must be a string")
            if not re.fullmatch(r"--?[^\s-]\S*", shortcut):
                raise ValueError("command 'shortcut' must be a flag-like token such as '-b'")

        descr = coalesce(descr, inspect.getdoc(callback) or None)
        if descr is not None and not isinstance(descr, str):
            raise TypeError("command 'descr' must be a string")

        self._callback = callback
        self._name = name
        self._shortcut = coalesce(shortcut)
        self._descr = descr

    @property
    def name(self):
        return self._name

    @property
    def shortcut(self):
        return self._shortcut

    @property
    def descr(self):
        return self._descr

    def with_shortcut(self, shortcut, /):
        """
        Return a copy of this command reachable through shortcut as well.

        The original is left untouched, so the call chains naturally:
            beta = command(run_beta, name="beta").with_shortcut("-b")
        """
        return type(self)(self._callback, self._name, shortcut, self._descr)

    def __call__(self, arguments, /):
        return self._callback(list(arguments))

    def __repr__(self):
        return "command(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        yield "name", self._name
        yield "shortcut", self._shortcut
        yield "descr", self._descr


def command(source=Unset, /, *args, **kwargs):
    """
    Create a Command or return a decorator to build it later.

    Invocation modes
    - Direct:     cmd = command(func, name="x", shortcut="-x")
    - Decorator:  @command(shortcut="-x")
                  def x(arguments): ...
    - Bare:       @command
                  def x(arguments): ...
    """
    @rename("command")
    def wrapper(source, /):
        if not callable(source):
            raise TypeError("@command() must be applied to a callable")
        return Command(source, *args, **kwargs)

    return wrapper(source) if source is not Unset else wrapper


__all__ = (
    "Command",
    "command",
)
