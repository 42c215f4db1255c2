"""A Pong arcade game against a computer-controlled opponent, with a pygame window."""

__version__ = "1.0.0"