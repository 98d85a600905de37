import logging
import re

from routeparams import constants


log = logging.getLogger(__name__)


class PathTemplate:
    def __init__(self, config_string, regex=None):
        """
        :param str                  config_string: Path containing {identifier}
                                                   placeholders, eg, /user/{id}
        :param str|re.Pattern       regex: Pattern used to extract placeholder
                                           names. Group 1 must capture the
                                           identifier. Defaults to letters only.
        """
        self._config_string = config_string
        self._regex = constants.PLACEHOLDER_PATTERN if regex is None else regex

    def __repr__(self):
        return 'PathTemplate({!r})'.format(self._config_string)

    @property
    def keys(self):
        """
        Names of the placeholders in the order they first appear in the
        pattern. Repeated placeholders are only listed once.

        :rtype: tuple[str]
        """
        keys = []
        try:
            regex = re.compile(self._regex, re.IGNORECASE) if isinstance(self._regex, str) else self._regex
            for match in regex.finditer(self._config_string):
                key = match.group(1)
                if key not in keys:
                    keys.append(key)
        except (re.error, TypeError, IndexError) as e:
            log.warning('Unable to extract placeholders from %r: %s', self._config_string, e)
            return ()
        return tuple(keys)

    def resolve(self, fields, ignore=()):
        """
        Replaces every placeholder whose name matches a field with that
        field's rendered value. Fields are applied in the order given, each
        against the result of the previous replacement. Placeholders with no
        matching field are left untouched.

        :param Iterable[Field]  fields:
        :param Iterable[str]    ignore: Field names never substituted
        :rtype: str
        """
        path = self._config_string
        ignore = set(ignore)
        for field in fields:
            if field.name in ignore or field.token not in path:
                continue
            path = path.replace(field.token, field.render())
        return path
