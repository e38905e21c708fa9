"""Exceptions raised while turning a manifest into a dependency tree."""


class DepTreeError(Exception):
    """Base dependency-tree exception."""


class InvalidUserInputError(DepTreeError):
    """The caller supplied input that cannot be processed."""


class ManifestParseError(InvalidUserInputError):
    """Manifest text is not well-formed XML or JSON."""


class UnsupportedManifestError(InvalidUserInputError):
    """No translator handles the given manifest file name."""


class ManifestNotFoundError(InvalidUserInputError):
    """Manifest file does not exist."""
