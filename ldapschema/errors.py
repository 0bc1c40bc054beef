"""
Exceptions raised by schema elements.
"""

from ldapschema._encoder import to_bytes


class SchemaElementError(Exception):
    """Schema element error"""

    def __init__(self, message=None):
        Exception.__init__(self, message)
        self.message = message

    def __str__(self):
        if self.message:
            return self.message
        return self.__doc__

    def toWire(self):
        return to_bytes(str(self))


class UnsupportedOperation(SchemaElementError):
    """Schema elements are read-only"""

    def __init__(self, method, element=None):
        self.method = method
        if element is None:
            message = "%s is not supported" % method
        else:
            message = "%s is not supported by %s" % (
                method,
                element.__class__.__name__,
            )
        SchemaElementError.__init__(self, message)


class ReadOnlyAttribute(UnsupportedOperation, AttributeError):
    """Schema element attributes cannot be assigned after construction"""

    def __init__(self, attribute, element=None):
        self.attribute = attribute
        UnsupportedOperation.__init__(
            self, "setting attribute %r" % attribute, element
        )


class MissingField(SchemaElementError, ValueError):
    """A required field of the schema element was not given"""

    def __init__(self, field, element=None):
        self.field = field
        message = "%s is required" % field
        if element is not None:
            message = "%s for %s" % (message, element.__class__.__name__)
        SchemaElementError.__init__(self, message)


class InvalidField(SchemaElementError, ValueError):
    """A field of the schema element has a value outside its allowed set"""

    def __init__(self, field, value, allowed):
        self.field = field
        self.value = value
        SchemaElementError.__init__(
            self,
            "%s must be one of %s, not %r"
            % (field, ", ".join(allowed), value),
        )
