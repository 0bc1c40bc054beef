from zope.interface import Interface, Attribute


class ISchemaElement(Interface):
    """
    A single, read-only LDAP schema definition, such as one attribute
    type or one object class, as found in a subschema subentry.

    The element is an attribute with exactly one value: its canonical
    string, usable verbatim in a modify or add operation.

    >>> at = AttributeTypeDescription(
    ...     oid='2.5.4.3', name=['cn'], desc='Common Name')
    >>> at.setQualifier('X-ORIGIN', ['RFC 4519'])
    >>> at.toCanonicalString()
    "( 2.5.4.3 NAME 'cn' DESC 'Common Name' X-ORIGIN 'RFC 4519' )"
    """

    key = Attribute(
        "Name of the subschema attribute holding this kind of element, "
        "eg. 'attributeTypes'."
    )

    def getNames():
        """
        Get the NAME values.

        @return: a new list of names, or None if the element has none.
        """

    def getDescription():
        """Get the DESC value, or None."""

    def getId():
        """Get the object identifier (or rule id) of the element."""

    def isObsolete():
        """Whether the element carries the OBSOLETE flag."""

    def getQualifierNames():
        """
        Get the names of all qualifiers present, in the order they
        were first set.
        """

    def getQualifier(name):
        """
        Get the values of a qualifier.

        @param name: qualifier name, matched case-sensitively.

        @return: a new list of values, or None if no such qualifier
        is present.
        """

    def setQualifier(name, values):
        """
        Set the values of a qualifier, replacing any earlier values,
        and regenerate the canonical string before returning.

        @param values: sequence of strings. None is treated as an empty
        sequence.
        """

    def toCanonicalString():
        """
        Get the canonical string, always in sync with the current
        qualifiers.
        """

    def toWire():
        """Get the canonical string as UTF-8 bytes."""

    def formatString():
        """
        Format the current fields as a schema definition string. This
        has no side effects.
        """

    def addValue(value):
        """
        Always raises L{ldapschema.errors.UnsupportedOperation}.
        """

    def removeValue(value):
        """
        Always raises L{ldapschema.errors.UnsupportedOperation}.
        """
