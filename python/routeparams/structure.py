import logging

from routeparams import field


log = logging.getLogger(__name__)


class Structure:
    """
    Base for any value that can be converted to a parameter mapping. Fields
    are declared explicitly, in order, by listing the attribute names in
    FIELDS. Subclasses with computed or renamed fields can override
    describe_fields instead.
    """
    FIELDS = ()  # type: tuple[str, ...]

    def __repr__(self):
        values = ', '.join('{}={!r}'.format(name, getattr(self, name)) for name in self.FIELDS)
        return '{}({})'.format(self.__class__.__name__, values)

    def describe_fields(self):
        """
        :rtype: list[field.Field]
        """
        return [field.get_field(name, getattr(self, name)) for name in self.FIELDS]


def build_parameters(structure, ignore=()):
    """
    Converts the fields of a structure to a dictionary. Nested structures are
    converted to sub-dictionaries, values without a mapping representation
    are left out.

    Only the top level is filtered by ignore; nested structures keep all of
    their fields.

    :param structure:               Any object implementing describe_fields
    :param Iterable[str] ignore:    Field names to leave out
    :rtype: dict[str, object]
    """
    ignore = set(ignore)
    parameters = {}
    for described in structure.describe_fields():
        name = described.name
        if name in ignore:
            continue
        if isinstance(described, field.NestedField):
            parameters[name] = build_parameters(described.value)
        elif described.representable:
            parameters[name] = described.value
        else:
            log.debug('Dropping unrepresentable field %s from parameters', described)
    return parameters
