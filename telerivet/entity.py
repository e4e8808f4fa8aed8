import logging
from string import Formatter

from telerivet import signals
from telerivet.exceptions import NotLoaded, ValidationError
from telerivet.fields import Raw
from telerivet.utils import AttributeDict

log = logging.getLogger(__name__)

_variable = Raw({"type": ["string", "number", "boolean"]}, io="rw", attribute="vars")

_variable_types = {
    type_: Raw({"type": type_}, nullable=False)
    for type_ in ("string", "number", "integer", "boolean")
}


class EntityMeta(type):

    def __new__(mcs, name, bases, members):
        class_ = super(EntityMeta, mcs).__new__(mcs, name, bases, members)
        class_.meta = meta = AttributeDict()

        for base in bases:
            if hasattr(base, 'meta'):
                meta.update(base.meta)

        if 'Meta' in members:
            changes = members['Meta'].__dict__
            for k, v in changes.items():
                if not k.startswith('__'):
                    meta[k] = v

        fields = {}
        for base in bases:
            fields.update(getattr(base, 'fields', None) or {})

        if 'Schema' in members:
            for key, field in members['Schema'].__dict__.items():
                if key.startswith('__'):
                    continue
                if field.attribute is None:
                    field.attribute = key
                fields[key] = field
                setattr(class_, key, field)

        class_.fields = fields

        path = meta.get('path')
        if path:
            meta['path_fields'] = tuple(n for _, n, _, _ in Formatter().parse(path) if n)
        return class_


class Entity(object, metaclass=EntityMeta):
    """
    A resource of the Telerivet API.

    An entity wraps the JSON object returned by the API. Declared fields are available as typed
    attributes, while :meth:`get` and :meth:`set` give access to any field, including ones the client does
    not know about. Changes are kept locally until :meth:`save` is called.

    An entity is configured using the `Schema` and `Meta` attributes:

    =====================  ==============================  ==============================================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==============================================================================
    path                   ---                             Path template of the resource, formatted with the entity's fields,
                                                           e.g. ``/projects/{project_id}/contacts/{id}``
    =====================  ==============================  ==============================================================================

    Usage example:

    .. code-block:: python

        class Label(Entity):
            class Schema:
                id = fields.String(max_length=34)
                name = fields.String(io="rw")
                project_id = fields.String()

            class Meta:
                path = '/projects/{project_id}/labels/{id}'

    :param API api: the client used for all requests made by the entity
    :param dict data: known fields of the entity
    :param bool is_loaded: ``False`` if ``data`` only contains identifying fields and the rest should be
        fetched by :meth:`load`
    """
    fields = None

    def __init__(self, api, data, is_loaded=True):
        self.api = api
        self._dirty = {}
        self.set_data(data)
        self._is_loaded = is_loaded

    def set_data(self, data):
        self._data = dict(data)
        self._data['vars'] = dict(self._data.get('vars') or {})
        self.vars = CustomVars(self._data['vars'])

    @property
    def is_loaded(self):
        return self._is_loaded

    @property
    def dirty(self):
        """
        Fields changed locally since the last save.
        """
        return dict(self._dirty)

    def assert_loaded(self, name=None):
        if not self._is_loaded:
            raise NotLoaded(self, name)

    def get(self, name):
        try:
            return self._data[name]
        except KeyError:
            self.assert_loaded(name)
            return None

    def set(self, name, value):
        if name == 'vars':
            # the bag and the backing data share one dict
            value = dict(value or {})
            self.vars = CustomVars(value, dirty=self.vars.dirty)
        self._data[name] = value
        self._dirty[name] = value

    def get_base_api_path(self):
        return self.meta.path.format(**{name: self.get(name) for name in self.meta.path_fields})

    def load(self):
        """
        Fetch the entity if it has not been loaded yet.

        Fields and custom variables changed locally keep their local value.
        """
        if self._is_loaded:
            return self

        data = self.api.request('GET', self.get_base_api_path())
        dirty = dict(self._dirty)
        dirty_vars = self.vars.dirty

        self.set_data(data)
        for name, value in dirty.items():
            self.set(name, value)
        for name, value in dirty_vars.items():
            self.vars.set(name, value)

        self._is_loaded = True
        signals.after_load.send(self)
        return self

    def save(self):
        """
        Send all fields and custom variables changed since the last save.

        The response is not merged back into the entity.
        """
        patch = dict(self._dirty)
        dirty_vars = self.vars.dirty
        if 'vars' in patch or dirty_vars:
            patch['vars'] = dict(patch.get('vars') or {})
            patch['vars'].update(dirty_vars)

        signals.before_save.send(self, patch=patch)
        self.api.request('POST', self.get_base_api_path(), patch)

        self._dirty = {}
        self.vars.clear_dirty()
        log.debug('Saved %s fields of %r', len(patch), self)

        signals.after_save.send(self, patch=patch)
        return self

    def _delete(self):
        signals.before_delete.send(self)
        self.api.request('DELETE', self.get_base_api_path())
        signals.after_delete.send(self)

    def __repr__(self):
        if self._is_loaded:
            return '<{} {}>'.format(self.__class__.__name__, self._data)
        return '<{} (not loaded) {}>'.format(self.__class__.__name__, self._data)


class DeleteMixin(object):

    def delete(self):
        """
        Delete the entity on the server. The local copy is left as it was.
        """
        self._delete()


class CustomVars(object):
    """
    Custom variables of an entity, backed by the entity's ``vars`` data.

    Setting a variable to ``None`` removes it and deletes it on the server on the next save.
    """

    def __init__(self, values, dirty=None):
        self._values = values
        self._dirty = dict(dirty or {})

    def all(self):
        return dict(self._values)

    @property
    def dirty(self):
        return dict(self._dirty)

    def clear_dirty(self):
        self._dirty = {}

    def get(self, name):
        return self._values.get(name)

    def _get_typed(self, name, type_):
        value = self._values.get(name)
        if value is None:
            return None
        errors = list(_variable_types[type_]._validator.iter_errors(value))
        if errors:
            raise ValidationError(errors, name)
        return value

    def get_string(self, name):
        return self._get_typed(name, "string")

    def get_number(self, name):
        return self._get_typed(name, "number")

    def get_int(self, name):
        return self._get_typed(name, "integer")

    def get_boolean(self, name):
        return self._get_typed(name, "boolean")

    def set(self, name, value):
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = _variable.validate(value)
        self._dirty[name] = value

    def __getitem__(self, name):
        return self._values[name]

    def __setitem__(self, name, value):
        self.set(name, value)

    def __delitem__(self, name):
        self.set(name, None)

    def __contains__(self, name):
        return name in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return 'CustomVars({!r})'.format(self._values)

