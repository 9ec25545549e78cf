"""
Junction router: pick exactly one command for a token store.

Policy (single pass, no backtracking)
- the candidate is the first token still UNASSIGNED after the program name.
- no candidate                  → default command.
- candidate looks like a flag   → command whose shortcut equals it (when
                                  shortcut routing is on), otherwise the
                                  default command; the flag stays unassigned
                                  for the default command's own options.
- candidate looks like a name   → command with exactly that name, otherwise
                                  RoutingFailedError. unknown names never fall
                                  back to the default command: a misspelled
                                  sub-command is surfaced to the user.

Only a matched candidate is classified (COMMAND_NAME); nothing is classified
when routing fails. Registry order breaks ties: first match wins.

Entry points
- Router(commands, tokens, default, config).route()
- route(tokens, commands, default, config)
- invoke(commands, default, prompt, config): build tokens, route, and call the
  selected command with the leftover arguments.
"""
import difflib
import sys
from collections.abc import Iterable
from typing import NamedTuple

from .faults import FaultCode, RoutingFailedError, getdoc, trigger
from .tokens import Role, Tokens
from .utils import Unset, ordinal

FLAG_PREFIX = "-"


class Config(NamedTuple):
    """
    router configuration.

    - shortcuts: route flag-like candidates to the command owning that shortcut.
    - shell: print faults on stderr and exit(1) instead of raising.
    - fancy: render faults inside a panel.
    - colorful: style rendered faults.
    """
    shortcuts: bool = True
    shell: bool = False
    fancy: bool = False
    colorful: bool = False


class Router:
    """
    Stateless chooser between registered commands.

    Parameters
    - commands: Iterable of objects exposing name and shortcut (see Command).
      Kept in registration order.
    - tokens: Tokens for this invocation; mutated by route() on success.
    - default: command selected when there is no candidate, or when the
      candidate is a flag owned by no shortcut.
    - config: Config | None | Unset (Config() when not given).
    """

    def __init__(self, commands, tokens, default, config=Unset):
        if isinstance(commands, str) or not isinstance(commands, Iterable):
            raise TypeError("router 'commands' must be an iterable of commands")
        if not isinstance(tokens, Tokens):
            raise TypeError("router 'tokens' must be tokens")
        if config is Unset or config is None:
            config = Config()
        elif not isinstance(config, Config):
            raise TypeError("router 'config' must be a config")

        self._commands = tuple(commands)
        self._tokens = tokens
        self._default = default
        self._config = config

    @property
    def commands(self):
        return self._commands

    @property
    def tokens(self):
        return self._tokens

    @property
    def default(self):
        return self._default

    @property
    def config(self):
        return self._config

    def route(self):
        """
        Select a command and classify its token.

        Returns
        - the selected command (the default one included).

        Raises
        - RoutingFailedError when the candidate is not a flag and names no
          registered command (rendered instead when config.shell is set).
        """
        index, candidate = self._candidate()

        if candidate is None:
            return self._default

        if candidate.startswith(FLAG_PREFIX):
            if not self._config.shortcuts:
                return self._default
            for command in self._commands:
                if command.shortcut == candidate:
                    self._tokens.classify_at(index, Role.COMMAND_NAME)
                    return command
            return self._default

        for command in self._commands:
            if command.name == candidate:
                self._tokens.classify_at(index, Role.COMMAND_NAME)
                return command

        self._fail(candidate, index)

    def _candidate(self):
        for index, (value, role) in enumerate(self._tokens.roles()):
            if role is Role.UNASSIGNED:
                return index, value
        return None, None

    def _fail(self, candidate, index):
        names = [command.name for command in self._commands]
        suggestions = difflib.get_close_matches(candidate, names, 5)
        prog = self._tokens.first_of_role(Role.PROGRAM_NAME)

        try:
            hint = "did you mean %r? you can also run '%s --help' to see available commands" % (suggestions[0], prog)
        except IndexError:
            hint = "run '%s --help' to see available commands" % prog

        trigger(
            RoutingFailedError("unknown command %r at %s position" % (candidate, ordinal(index))),
            title="unknown command",
            code=FaultCode.ROUTING_FAILED,
            input=candidate,
            index=index,
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.ROUTING_FAILED),
            prog=prog,
            shell=self._config.shell,
            fancy=self._config.fancy,
            colorful=self._config.colorful,
        )

    def __repr__(self):
        return "router(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        yield "commands", self._commands
        yield "default", self._default
        yield "config", self._config


def route(tokens, commands, default, config=Unset):
    """functional form of Router(commands, tokens, default, config).route()."""
    return Router(commands, tokens, default, config).route()


def invoke(commands, default, prompt=Unset, /, config=Unset):
    """
    Route a prompt and run the selected command with its leftover arguments.

    Parameters
    - prompt:
      • Unset: the current process arguments (sys.argv).
      • str: a command-line string, split with Tokens.parse (program name first).
      • Iterable[str]: pre-split arguments, program name first.

    Returns
    - whatever the selected command returns when called with
      tokens.unassigned().
    """
    if prompt is Unset:
        tokens = Tokens(sys.argv)
    elif isinstance(prompt, str):
        tokens = Tokens.parse(prompt)
    elif isinstance(prompt, Iterable):
        tokens = Tokens(prompt)
    else:
        raise TypeError("invoke() prompt must be a string or an iterable of strings")

    command = Router(commands, tokens, default, config).route()
    if not callable(command):
        raise TypeError("invoke() selected command %r is not callable" % command)
    return command(tokens.unassigned())


__all__ = (
    "FLAG_PREFIX",
    "Config",
    "Router",
    "route",
    "invoke",
)
