"""A Pure-Python library for LDAP schema elements"""
__version__ = "21.2.0"

__title__ = "ldapschema"
__description__ = "A Pure-Python library for LDAP schema elements"
__uri__ = "https://github.com/twisted/ldaptor"

__license__ = "MIT"
__author__ = "The ldaptor developers"
__copyright__ = "Copyright (c) 2002-2019 {}".format(__author__)
