from routeparams import constants


class Field:
    """
    A single named value described by a structure. The subclass decides how
    the value takes part in parameter mappings and path substitution.
    """
    #: Whether or not the value may be stored in a parameter mapping
    representable = False

    def __init__(self, name, value):
        """
        :param str      name:
        :param object   value:
        """
        self._name = name
        self._value = value

    def __repr__(self):
        return '{self.__class__.__name__}({self._name!r}, {self._value!r})'.format(self=self)

    def __str__(self):
        return '{}({})'.format(self.__class__.__name__, self._name)

    @property
    def name(self):
        """
        :rtype: str
        """
        return self._name

    @property
    def token(self):
        """
        Placeholder text this field replaces in a path, eg, {id}

        :rtype: str
        """
        return constants.PLACEHOLDER_FORMAT % self._name

    @property
    def value(self):
        """
        :return: The value exactly as it was described
        """
        return self._value

    def render(self):
        """
        Converts the value to the string used when substituting into a path.

        :rtype: str
        """
        return '{}'.format(self._value)


class NestedField(Field):
    """ Value is itself a structure and expands to a sub-mapping """
    representable = True


class PrimitiveField(Field):
    representable = True

    def render(self):
        # Objects may provide their own canonical form, strings are used as-is
        render = getattr(self._value, 'render', None)
        if callable(render):
            return '{}'.format(render())
        if isinstance(self._value, str):
            return self._value
        return super().render()


class OpaqueField(Field):
    """
    Value has no mapping representation. It is dropped from parameters but
    still rendered with the default string conversion for paths.
    """


PRIMITIVE_TYPES = (str, bool, int, float, list, tuple, dict)


def is_structure(value):
    """
    Whether or not the value can describe its own fields

    :param object value:
    :rtype: bool
    """
    return callable(getattr(value, 'describe_fields', None))


def get_field(name, value):
    """
    Creates the Field variant matching the value

    :param str      name:
    :param object   value:
    :rtype: Field
    """
    if is_structure(value):
        return NestedField(name, value)
    if isinstance(value, PRIMITIVE_TYPES) or callable(getattr(value, 'render', None)):
        return PrimitiveField(name, value)
    return OpaqueField(name, value)
