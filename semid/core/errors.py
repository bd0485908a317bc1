"""Error types raised by semid.

Every error is a caller-input or configuration problem; none are transient.
All derive from SemanticIDError so callers can catch the whole family.
"""


class SemanticIDError(ValueError):
    """Base class for all semid errors."""

    pass


class InvalidLengthError(SemanticIDError):
    """A strategy was asked for a non-positive or non-integer length."""

    pass


class ConfigurationError(SemanticIDError):
    """A configuration has the wrong shape or references unknown values."""

    pass


class UnknownPresetError(ConfigurationError):
    """A preset name is not a string or is not in the catalog."""

    pass


class InvalidConceptNameError(SemanticIDError):
    """The data concept name passed to the generator is empty or not a string."""

    pass


class InvalidInputError(SemanticIDError):
    """The candidate passed to the inspector is blank or not a string."""

    pass


class ConfigurationResolutionError(SemanticIDError):
    """The inspector could not decide which configuration to validate against."""

    pass


class DictionaryLoadError(SemanticIDError):
    """The passphrase word-list resource could not be loaded.

    Cached by the dictionary cache so the resource is not re-read on
    every call.
    """

    pass


class UnsupportedSchemaFormatError(SemanticIDError):
    """Schema export was requested in a format other than jsonld or owl."""

    pass
