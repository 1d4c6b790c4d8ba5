"""Exceptions raised while building the site."""


class BuildError(Exception):
    """The build cannot continue; the CLI reports it and exits non-zero."""


class FrontMatterError(BuildError):
    """A page carries front matter that is not a flat key/value mapping."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid front matter in {source}: {reason}")
