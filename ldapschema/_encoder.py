"""
    Encoding / decoding utilities
"""


def to_bytes(value):
    """
    Converts value to its bytes representation:

    * Uses value`s toWire method if it has one
    * Encodes to utf-8 if the value is a unicode string
    * Otherwise wraps value into bytes()
    """
    if hasattr(value, "toWire"):
        return value.toWire()
    if isinstance(value, int):
        return str(value).encode("utf-8")
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def to_unicode(value):
    """
    Converts string to unicode:

    * Decodes value from utf-8 if it is a byte string
    * Otherwise just returns the same value
    """
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def to_unicode_tuple(values):
    """
    Converts a single string or an iterable of strings
    into a tuple of unicode strings.
    """
    if values is None:
        return ()
    if isinstance(values, (bytes, str)):
        return (to_unicode(values),)
    return tuple(to_unicode(v) for v in values)
