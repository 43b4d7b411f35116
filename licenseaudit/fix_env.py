"""Logic for building the environment passed to the go tool."""

import os


def fix_env(gopath: str | None = None) -> dict[str, str]:
    """Return a copy of the process environment with GOPATH overridden if given."""
    env = dict(os.environ)
    if gopath:
        env["GOPATH"] = gopath
    return env
