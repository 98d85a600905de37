from routeparams import constants
from routeparams import field
from routeparams.pathtemplate import PathTemplate
from routeparams.structure import Structure, build_parameters


class Endpoint(Structure):
    """
    Describes an HTTP endpoint. Subclasses set the path and method and list
    their fields in FIELDS, eg:

        class GetUser(Endpoint):
            path = '/user/{id}'
            FIELDS = ('id', 'verbose')

            def __init__(self, id, verbose=False):
                self.id = id
                self.verbose = verbose

        GetUser(1).parsed_path  # '/user/1'
        GetUser(1).parameters   # {'verbose': False}

    Every derived value is computed from the current fields on access.
    """
    path = ''
    method = constants.DEFAULT_METHOD
    known_keys = constants.KNOWN_KEYS

    @property
    def path_template(self):
        """
        :rtype: PathTemplate
        """
        return PathTemplate(self.path)

    @property
    def path_keys(self):
        """
        Names of the placeholders used in the path, in order of appearance

        :rtype: tuple[str]
        """
        return self.path_template.keys

    @property
    def parameters(self):
        """
        Fields converted to a dictionary, excluding the known keys and any
        field consumed by the path.

        :rtype: dict[str, object]
        """
        ignore = tuple(self.known_keys) + self.path_keys
        return build_parameters(self, ignore=ignore)

    @property
    def parsed_path(self):
        """
        The path with every placeholder that matches a field replaced by the
        field's value.

        :rtype: str
        """
        return self.path_template.resolve(self.describe_fields(), ignore=self.known_keys)


class Request(Endpoint):
    """ Endpoint whose fields are provided as a mapping rather than attributes """

    def __init__(self, path, method=constants.DEFAULT_METHOD, fields=None, known_keys=None):
        """
        :param str              path:
        :param str              method:
        :param dict[str, object] fields: Field values in declaration order
        :param Iterable[str]    known_keys: Overrides the default known keys
        """
        self.path = path
        self.method = method
        self._fields = dict(fields or {})
        if known_keys is not None:
            self.known_keys = tuple(known_keys)

    def __repr__(self):
        return 'Request({!r}, method={!r}, fields={!r})'.format(self.path, self.method, self._fields)

    @property
    def fields(self):
        """
        :rtype: dict[str, object]
        """
        return self._fields.copy()

    def describe_fields(self):
        """
        :rtype: list[field.Field]
        """
        return [field.get_field(name, value) for name, value in self._fields.items()]
