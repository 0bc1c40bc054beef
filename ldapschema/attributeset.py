class LDAPAttributeSet(set):
    def __init__(self, key, *a, **kw):
        """
        Represents all the values of one attribute, such as the
        "attributeTypes" or "objectClasses" attribute of a subschema
        subentry.

        You can find the name of the attribute with the ``.key`` member
        variable, and its values by casting this to a ``list``.

        @param key: the name of the attribute, eg. "attributeTypes".
        @type key: str
        @param args: set of values for this attribute.
        """
        self.key = key
        super(LDAPAttributeSet, self).__init__(*a, **kw)

    def __eq__(self, other):
        """
        Note that LDAPAttributeSets can also be compared against any
        iterator. In that case the key will be ignored.
        """
        if isinstance(other, LDAPAttributeSet):
            if self.key != other.key:
                return False
            return super(LDAPAttributeSet, self).__eq__(other)
        else:
            me = list(self)
            me.sort()
            him = list(other)
            him.sort()
            return me == him

    def __ne__(self, other):
        return not self == other

    def addValue(self, value):
        """Add one value to the attribute."""
        self.add(value)

    def removeValue(self, value):
        """
        Remove one value from the attribute.

        @raise KeyError: value is not present.
        """
        self.remove(value)
