from rich.pretty import pprint

from junction import *


@command(shortcut="-l")
def listing(arguments):
    """list every entry"""
    pprint(arguments)


@command
def add(arguments):
    """add a new entry"""
    pprint(arguments)


@command
def default(arguments):
    pprint(arguments)


if __name__ == '__main__':
    invoke([listing, add], default, config=Config(shell=True, colorful=True))
