from functools import cached_property

from jsonschema import Draft4Validator

from telerivet.exceptions import ValidationError


class Raw(object):
    """
    Base class for all field types, can be given any JSON-schema.

    Fields are descriptors: declared in the ``Schema`` of an :class:`telerivet.entity.Entity`, they read
    from and write to the entity's backing data under the field's name.

    >>> f = fields.Raw({"type": "string"}, io="rw")
    >>> f.schema
    {'type': ['string', 'null']}

    :param dict schema: JSON-schema for values of the field
    :param str io: ``"r"`` for read-only fields, ``"rw"`` for fields that are updatable via the API
    :param bool nullable: whether ``null`` is an acceptable value, default: ``True``
    :param attribute: key in the backing data; defaults to the name of the field in the ``Schema``
    :param str description: optional description
    """

    def __init__(self, schema, io="r", nullable=True, attribute=None, description=None):
        self._schema = schema
        self.io = io
        self.nullable = nullable
        self.attribute = attribute
        self.description = description

    @cached_property
    def schema(self):
        schema = dict(self._schema)

        if self.nullable and "type" in schema:
            type_ = schema["type"]
            if isinstance(type_, str):
                schema["type"] = [type_, "null"]
            elif "null" not in type_:
                schema["type"] = list(type_) + ["null"]

        if self.description is not None:
            schema["description"] = self.description
        return schema

    @cached_property
    def _validator(self):
        Draft4Validator.check_schema(self.schema)
        return Draft4Validator(self.schema)

    def validate(self, value):
        errors = list(self._validator.iter_errors(value))
        if errors:
            raise ValidationError(errors, self.attribute)
        return value

    def convert(self, value):
        """
        Validate a Python value and convert it to its JSON representation.
        """
        return self.converter(self.validate(value))

    def format(self, value):
        """
        Format a JSON value for use in Python. Noop by default.
        """
        if value is not None:
            return self.formatter(value)
        return value

    def formatter(self, value):
        return value

    def converter(self, value):
        return value

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return self.format(instance.get(self.attribute))

    def __set__(self, instance, value):
        if 'w' not in self.io:
            raise AttributeError('{}.{} is read-only'.format(instance.__class__.__name__, self.attribute))
        instance.set(self.attribute, self.convert(value))

    def __repr__(self):
        return '{}(attribute={})'.format(self.__class__.__name__, repr(self.attribute))


class Any(Raw):
    """
    A field type that allows any value.
    """

    def __init__(self, **kwargs):
        super(Any, self).__init__({"type": ["null", "string", "number", "boolean", "object", "array"]}, **kwargs)


class String(Raw):
    """
    :param int max_length: maximum length of the string
    """

    def __init__(self, max_length=None, **kwargs):
        schema = {"type": "string"}
        if max_length is not None:
            schema["maxLength"] = max_length
        super(String, self).__init__(schema, **kwargs)


class Boolean(Raw):

    def __init__(self, **kwargs):
        super(Boolean, self).__init__({"type": "boolean"}, **kwargs)


class Integer(Raw):

    def __init__(self, minimum=None, maximum=None, **kwargs):
        schema = {"type": "integer"}
        if minimum is not None:
            schema["minimum"] = minimum
        if maximum is not None:
            schema["maximum"] = maximum
        super(Integer, self).__init__(schema, **kwargs)

    def formatter(self, value):
        return int(value)


class Number(Raw):

    def __init__(self, **kwargs):
        super(Number, self).__init__({"type": "number"}, **kwargs)


class Timestamp(Integer):
    """
    A UNIX timestamp in seconds.
    """


class Array(Raw):
    """
    A field for an array of a given field type.

    :param Raw items: field describing each item, optional
    """

    def __init__(self, items=None, **kwargs):
        schema = {"type": "array"}
        if items is not None:
            schema["items"] = items.schema
        super(Array, self).__init__(schema, **kwargs)


class Object(Raw):

    def __init__(self, **kwargs):
        super(Object, self).__init__({"type": "object"}, **kwargs)
