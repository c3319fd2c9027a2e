"""shuffledns — massdns-backed subdomain enumeration front end.

Turns command-line flags and piped standard input into a validated run
configuration for the enumeration engine.
"""

from shuffledns.version import __version__

__all__: list[str] = ["__version__"]
