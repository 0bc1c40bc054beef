"""
LDAP schema elements.

Every element is a read-only, single-valued attribute: its one value is
the canonical RFC 4512 string for the definition, kept in sync with the
element's fields.
"""
import configparser
import logging

from twisted.python import log
from zope.interface import implementer

from ldapschema import attributeset, config, errors, interfaces
from ldapschema._encoder import to_bytes, to_unicode, to_unicode_tuple


def _unsupported(method):
    def reject(self, *a, **kw):
        raise errors.UnsupportedOperation(method, self)

    reject.__name__ = method
    reject.__doc__ = "Always raises UnsupportedOperation, schema elements are read-only."
    return reject


def _rebuild(cls, fields, qualifiers):
    return cls(qualifiers=qualifiers, **fields)


class ASN1Formatter:
    def _str_list(self, l):
        """Format a list of names as qdescrs."""
        s = " ".join([self._str(x) for x in l])
        if len(l) > 1:
            s = "( %s )" % s
        return s

    def _list(self, l):
        """Format a list of oids as oids."""
        s = " $ ".join([x for x in l])
        if len(l) > 1:
            s = "( %s )" % s
        return s

    def _id_list(self, l):
        """Format a list of rule ids as ruleids."""
        s = " ".join([x for x in l])
        if len(l) > 1:
            s = "( %s )" % s
        return s

    def _str(self, s):
        """Quote s as a qdstring."""
        return "'%s'" % s.replace("\\", "\\5C").replace("'", "\\27")


@implementer(interfaces.ISchemaElement)
class SchemaElement(ASN1Formatter, attributeset.LDAPAttributeSet):
    """
    Base class of all schema elements.

    Subclasses set their own fields and then call
    SchemaElement.__init__, which computes the canonical string and
    makes the element read-only. setQualifier is the only way to change
    an element afterwards.
    """

    # name of the subschema attribute holding this kind of element
    schemaAttribute = None

    # constructor arguments, stored under the same attribute names
    _fieldNames = ("oid", "name", "desc", "obsolete")

    _frozen = False

    def __init__(self, oid, name=None, desc=None, obsolete=False, qualifiers=None):
        oid = to_unicode(oid)
        if not oid:
            raise errors.MissingField("oid", self)
        self.oid = oid

        name = to_unicode_tuple(name)
        self.name = name or None
        self.desc = to_unicode(desc)
        self.obsolete = bool(obsolete)

        self._qualifiers = {}
        if qualifiers is not None:
            if hasattr(qualifiers, "items"):
                qualifiers = qualifiers.items()
            for qualifier, values in qualifiers:
                qualifier = to_unicode(qualifier)
                self._checkQualifierName(qualifier)
                self._qualifiers[qualifier] = to_unicode_tuple(values)

        attributeset.LDAPAttributeSet.__init__(self, self.schemaAttribute)
        self._regenerate()
        self._frozen = True

    def __setattr__(self, name, value):
        if self._frozen:
            raise errors.ReadOnlyAttribute(name, self)
        super(SchemaElement, self).__setattr__(name, value)

    def __delattr__(self, name):
        if self._frozen:
            raise errors.ReadOnlyAttribute(name, self)
        super(SchemaElement, self).__delattr__(name)

    def _checkQualifierName(self, name):
        try:
            prefix = config.qualifierPrefix()
            warn = config.warnUnconventionalQualifiers()
        except (configparser.Error, ValueError):
            log.err(None, "Cannot read the qualifier naming configuration")
            return
        if warn and not name.startswith(prefix):
            log.msg(
                "Qualifier %r of %s %s does not start with %r"
                % (name, self.schemaAttribute, self.oid, prefix),
                logLevel=logging.WARNING,
            )

    def _regenerate(self):
        value = self.formatString()
        set.clear(self)
        set.add(self, value)

    def getNames(self):
        if self.name is None:
            return None
        return list(self.name)

    def getDescription(self):
        return self.desc

    def getId(self):
        return self.oid

    def isObsolete(self):
        return self.obsolete

    def getQualifierNames(self):
        return list(self._qualifiers)

    def getQualifier(self, name):
        values = self._qualifiers.get(to_unicode(name))
        if values is None:
            return None
        return list(values)

    def setQualifier(self, name, values):
        """
        Set the values of a qualifier, replacing earlier values of the
        same name, and regenerate the canonical string.

        @param name: qualifier name, case-sensitive, usually starting
        with "X-".

        @param values: sequence of strings. A single string is one
        value, None is no values.
        """
        name = to_unicode(name)
        values = to_unicode_tuple(values)
        self._checkQualifierName(name)

        previous = self._qualifiers.get(name)
        self._qualifiers[name] = values
        try:
            self._regenerate()
        except Exception:
            if previous is None:
                del self._qualifiers[name]
            else:
                self._qualifiers[name] = previous
            raise
        log.msg(
            "Set qualifier %s of %s %s to %r" % (name, self.schemaAttribute, self.oid, values),
            debug=True,
        )

    def toCanonicalString(self):
        for value in set.__iter__(self):
            return value

    def toWire(self):
        return to_bytes(self.toCanonicalString())

    def __str__(self):
        return self.toCanonicalString()

    def formatString(self):
        raise NotImplementedError("formatString method is not implemented")

    def _standardFields(self):
        r = []
        if self.name is not None:
            r.append("NAME %s" % self._str_list(self.name))
        if self.desc is not None:
            r.append("DESC %s" % self._str(self.desc))
        if self.obsolete:
            r.append("OBSOLETE")
        return r

    def _qualifierFields(self):
        r = []
        for name, values in self._qualifiers.items():
            if len(values) == 1:
                r.append("%s %s" % (name, self._str(values[0])))
            elif values:
                r.append("%s ( %s )" % (name, " ".join(self._str(v) for v in values)))
            else:
                r.append("%s ( )" % name)
        return r

    def _format(self, fields):
        return "( %s )" % " ".join([self.oid] + fields + self._qualifierFields())

    addValue = _unsupported("addValue")
    removeValue = _unsupported("removeValue")
    add = _unsupported("add")
    remove = _unsupported("remove")
    discard = _unsupported("discard")
    pop = _unsupported("pop")
    clear = _unsupported("clear")
    update = _unsupported("update")
    intersection_update = _unsupported("intersection_update")
    difference_update = _unsupported("difference_update")
    symmetric_difference_update = _unsupported("symmetric_difference_update")
    __ior__ = _unsupported("__ior__")
    __iand__ = _unsupported("__iand__")
    __isub__ = _unsupported("__isub__")
    __ixor__ = _unsupported("__ixor__")

    def _fields(self):
        return {name: getattr(self, name) for name in self._fieldNames}

    def copy(self):
        return self.__class__(qualifiers=list(self._qualifiers.items()), **self._fields())

    __copy__ = copy

    def __deepcopy__(self, memo):
        result = self.copy()
        memo[id(self)] = result
        return result

    def __reduce__(self):
        return (_rebuild, (self.__class__, self._fields(), list(self._qualifiers.items())))

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} instance at 0x{id(self):x}"
            + " oid=%r name=%r desc=%r value=%r>"
            % (self.oid, self.name, self.desc, self.toCanonicalString())
        )

    def __lt__(self, other):
        if not isinstance(other, SchemaElement):
            return NotImplemented
        if self.name is not None and other.name is not None:
            return self.name[0].upper() < other.name[0].upper()
        else:
            return self.oid < other.oid

    def __gt__(self, other):
        if not isinstance(other, SchemaElement):
            return NotImplemented
        if self.name is not None and other.name is not None:
            return self.name[0].upper() > other.name[0].upper()
        else:
            return self.oid > other.oid

    def __le__(self, other):
        return self == other or self < other

    def __ge__(self, other):
        return self == other or self > other


class ObjectClassDescription(SchemaElement):
    """
    ASN Syntax::

        ObjectClassDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            [ SP "SUP" SP oids ]       ; superior object classes
            [ SP kind ]                ; kind of class
            [ SP "MUST" SP oids ]      ; attribute types
            [ SP "MAY" SP oids ]       ; attribute types
            extensions WSP RPAREN

        kind = "ABSTRACT" / "STRUCTURAL" / "AUXILIARY"
    """

    schemaAttribute = "objectClasses"
    _fieldNames = SchemaElement._fieldNames + ("sup", "type", "must", "may")

    types = ("ABSTRACT", "STRUCTURAL", "AUXILIARY")

    def __init__(
        self,
        oid,
        name=None,
        desc=None,
        obsolete=False,
        sup=None,
        type=None,
        must=None,
        may=None,
        qualifiers=None,
    ):
        self.sup = to_unicode_tuple(sup)
        type = to_unicode(type) or "STRUCTURAL"
        if type not in self.types:
            raise errors.InvalidField("type", type, self.types)
        self.type = type
        self.must = to_unicode_tuple(must)
        self.may = to_unicode_tuple(may)
        super(ObjectClassDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        if self.sup:
            r.append("SUP %s" % self._list(self.sup))
        r.append(self.type)
        if self.must:
            r.append("MUST %s" % self._list(self.must))
        if self.may:
            r.append("MAY %s" % self._list(self.may))
        return self._format(r)


class AttributeTypeDescription(SchemaElement):
    """
    ASN Syntax::

        AttributeTypeDescription = LPAREN WSP
            numericoid                    ; object identifier
            [ SP "NAME" SP qdescrs ]      ; short names (descriptors)
            [ SP "DESC" SP qdstring ]     ; description
            [ SP "OBSOLETE" ]             ; not active
            [ SP "SUP" SP oid ]           ; supertype
            [ SP "EQUALITY" SP oid ]      ; equality matching rule
            [ SP "ORDERING" SP oid ]      ; ordering matching rule
            [ SP "SUBSTR" SP oid ]        ; substrings matching rule
            [ SP "SYNTAX" SP noidlen ]    ; value syntax
            [ SP "SINGLE-VALUE" ]         ; single-value
            [ SP "COLLECTIVE" ]           ; collective
            [ SP "NO-USER-MODIFICATION" ] ; not user modifiable
            [ SP "USAGE" SP usage ]       ; usage
            extensions WSP RPAREN         ; extensions

        usage = "userApplications"     /  ; user
                "directoryOperation"   /  ; directory operational
                "distributedOperation" /  ; DSA-shared operational
                "dSAOperation"             ; DSA-specific operational
    """

    schemaAttribute = "attributeTypes"
    _fieldNames = SchemaElement._fieldNames + (
        "sup",
        "equality",
        "ordering",
        "substr",
        "syntax",
        "single_value",
        "collective",
        "no_user_modification",
        "usage",
    )

    usages = (
        "userApplications",
        "directoryOperation",
        "distributedOperation",
        "dSAOperation",
    )

    def __init__(
        self,
        oid,
        name=None,
        desc=None,
        obsolete=False,
        sup=None,
        equality=None,
        ordering=None,
        substr=None,
        syntax=None,
        single_value=False,
        collective=False,
        no_user_modification=False,
        usage=None,
        qualifiers=None,
    ):
        self.sup = to_unicode(sup)
        self.equality = to_unicode(equality)
        self.ordering = to_unicode(ordering)
        self.substr = to_unicode(substr)
        self.syntax = to_unicode(syntax)
        self.single_value = bool(single_value)
        self.collective = bool(collective)
        self.no_user_modification = bool(no_user_modification)
        usage = to_unicode(usage)
        if usage is not None and usage not in self.usages:
            raise errors.InvalidField("usage", usage, self.usages)
        self.usage = usage
        super(AttributeTypeDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        if self.sup is not None:
            r.append("SUP %s" % self.sup)
        if self.equality is not None:
            r.append("EQUALITY %s" % self.equality)
        if self.ordering is not None:
            r.append("ORDERING %s" % self.ordering)
        if self.substr is not None:
            r.append("SUBSTR %s" % self.substr)
        if self.syntax is not None:
            r.append("SYNTAX %s" % self.syntax)
        if self.single_value:
            r.append("SINGLE-VALUE")
        if self.collective:
            r.append("COLLECTIVE")
        if self.no_user_modification:
            r.append("NO-USER-MODIFICATION")
        if self.usage is not None:
            r.append("USAGE %s" % self.usage)
        return self._format(r)


class SyntaxDescription(SchemaElement):
    """
    ASN Syntax::

        SyntaxDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "DESC" SP qdstring ]  ; description
            extensions WSP RPAREN      ; extensions
    """

    schemaAttribute = "ldapSyntaxes"
    _fieldNames = ("oid", "desc")

    def __init__(self, oid, desc=None, qualifiers=None):
        super(SyntaxDescription, self).__init__(oid, desc=desc, qualifiers=qualifiers)

    @property
    def binary_transfer_required(self):
        return self.getQualifier("X-BINARY-TRANSFER-REQUIRED") == ["TRUE"]

    @property
    def human_readable(self):
        return self.getQualifier("X-NOT-HUMAN-READABLE") != ["TRUE"]

    def formatString(self):
        return self._format(self._standardFields())


class MatchingRuleDescription(SchemaElement):
    """
    ASN Syntax::

        MatchingRuleDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            SP "SYNTAX" SP numericoid  ; assertion syntax
            extensions WSP RPAREN      ; extensions
    """

    schemaAttribute = "matchingRules"
    _fieldNames = SchemaElement._fieldNames + ("syntax",)

    def __init__(self, oid, name=None, desc=None, obsolete=False, syntax=None, qualifiers=None):
        if not syntax:
            raise errors.MissingField("syntax", self)
        self.syntax = to_unicode(syntax)
        super(MatchingRuleDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        r.append("SYNTAX %s" % self.syntax)
        return self._format(r)


class MatchingRuleUseDescription(SchemaElement):
    """
    ASN Syntax::

        MatchingRuleUseDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            SP "APPLIES" SP oids       ; attribute types
            extensions WSP RPAREN      ; extensions
    """

    schemaAttribute = "matchingRuleUse"
    _fieldNames = SchemaElement._fieldNames + ("applies",)

    def __init__(self, oid, name=None, desc=None, obsolete=False, applies=None, qualifiers=None):
        applies = to_unicode_tuple(applies)
        if not applies:
            raise errors.MissingField("applies", self)
        self.applies = applies
        super(MatchingRuleUseDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        r.append("APPLIES %s" % self._list(self.applies))
        return self._format(r)


class DITContentRuleDescription(SchemaElement):
    """
    ASN Syntax::

        DITContentRuleDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            [ SP "AUX" SP oids ]       ; auxiliary object classes
            [ SP "MUST" SP oids ]      ; attribute types
            [ SP "MAY" SP oids ]       ; attribute types
            [ SP "NOT" SP oids ]       ; attribute types
            extensions WSP RPAREN      ; extensions
    """

    schemaAttribute = "dITContentRules"
    _fieldNames = SchemaElement._fieldNames + ("aux", "must", "may", "not_")

    def __init__(
        self,
        oid,
        name=None,
        desc=None,
        obsolete=False,
        aux=None,
        must=None,
        may=None,
        not_=None,
        qualifiers=None,
    ):
        self.aux = to_unicode_tuple(aux)
        self.must = to_unicode_tuple(must)
        self.may = to_unicode_tuple(may)
        self.not_ = to_unicode_tuple(not_)
        super(DITContentRuleDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        if self.aux:
            r.append("AUX %s" % self._list(self.aux))
        if self.must:
            r.append("MUST %s" % self._list(self.must))
        if self.may:
            r.append("MAY %s" % self._list(self.may))
        if self.not_:
            r.append("NOT %s" % self._list(self.not_))
        return self._format(r)


class DITStructureRuleDescription(SchemaElement):
    """
    ASN Syntax::

        DITStructureRuleDescription = LPAREN WSP
            ruleid                     ; rule identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            SP "FORM" SP oid           ; NameForm
            [ SP "SUP" ruleids ]       ; superior rules
            extensions WSP RPAREN      ; extensions

        ruleids = ruleid / ( LPAREN WSP ruleidlist WSP RPAREN )
        ruleidlist = ruleid *( SP ruleid )
        ruleid = number

    The rule id takes the place of the oid, so getId returns it.
    """

    schemaAttribute = "dITStructureRules"
    _fieldNames = ("ruleid", "name", "desc", "obsolete", "form", "sup")

    def __init__(self, ruleid, name=None, desc=None, obsolete=False, form=None, sup=None, qualifiers=None):
        if ruleid is None or ruleid == "" or ruleid == b"":
            raise errors.MissingField("ruleid", self)
        if not form:
            raise errors.MissingField("form", self)
        self.ruleid = to_unicode(to_bytes(ruleid))
        self.form = to_unicode(form)
        if isinstance(sup, (int, bytes, str)):
            sup = [sup]
        self.sup = tuple(to_unicode(to_bytes(x)) for x in sup or ())
        super(DITStructureRuleDescription, self).__init__(self.ruleid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        r.append("FORM %s" % self.form)
        if self.sup:
            r.append("SUP %s" % self._id_list(self.sup))
        return self._format(r)


class NameFormDescription(SchemaElement):
    """
    ASN Syntax::

        NameFormDescription = LPAREN WSP
            numericoid                 ; object identifier
            [ SP "NAME" SP qdescrs ]   ; short names (descriptors)
            [ SP "DESC" SP qdstring ]  ; description
            [ SP "OBSOLETE" ]          ; not active
            SP "OC" SP oid             ; structural object class
            SP "MUST" SP oids          ; attribute types
            [ SP "MAY" SP oids ]       ; attribute types
            extensions WSP RPAREN      ; extensions
    """

    schemaAttribute = "nameForms"
    _fieldNames = SchemaElement._fieldNames + ("oc", "must", "may")

    def __init__(self, oid, name=None, desc=None, obsolete=False, oc=None, must=None, may=None, qualifiers=None):
        if not oc:
            raise errors.MissingField("oc", self)
        must = to_unicode_tuple(must)
        if not must:
            raise errors.MissingField("must", self)
        self.oc = to_unicode(oc)
        self.must = must
        self.may = to_unicode_tuple(may)
        super(NameFormDescription, self).__init__(oid, name, desc, obsolete, qualifiers)

    def formatString(self):
        r = self._standardFields()
        r.append("OC %s" % self.oc)
        r.append("MUST %s" % self._list(self.must))
        if self.may:
            r.append("MAY %s" % self._list(self.may))
        return self._format(r)
