class TelerivetException(Exception):
    """
    Base class for all errors raised by the client.
    """

    def as_dict(self):
        return {
            'type': self.__class__.__name__,
            'message': str(self)
        }


class APIError(TelerivetException):
    """
    An error reported by the Telerivet API.

    :param str message: human-readable message returned by the server
    :param str code: machine-readable error code, e.g. ``"invalid_param"``
    """

    def __init__(self, message, code=None):
        super(APIError, self).__init__(message)
        self.message = message
        self.code = code

    def as_dict(self):
        dct = super(APIError, self).as_dict()
        dct['code'] = self.code
        return dct


class InvalidParameter(APIError):

    def __init__(self, message, code='invalid_param', param=None):
        super(InvalidParameter, self).__init__(message, code)
        self.param = param

    def as_dict(self):
        dct = super(InvalidParameter, self).as_dict()
        dct['param'] = self.param
        return dct


class NotFound(APIError):

    def __init__(self, message, code='not_found'):
        super(NotFound, self).__init__(message, code)


class MalformedResponse(APIError):
    """
    The response body could not be parsed as JSON.
    """

    def __init__(self, status_code, text):
        super(MalformedResponse, self).__init__(
            'Unexpected response from Telerivet API (HTTP {}): {}'.format(status_code, text))
        self.status_code = status_code
        self.text = text

    def as_dict(self):
        dct = super(MalformedResponse, self).as_dict()
        dct['status'] = self.status_code
        return dct


class NotLoaded(TelerivetException):

    def __init__(self, entity, name=None):
        what = entity.__class__.__name__ if name is None else "{}.{}".format(entity.__class__.__name__, name)
        super(NotLoaded, self).__init__(
            "{} is not loaded yet; call load() first".format(what))
        self.entity = entity
        self.name = name


class ValidationError(TelerivetException):

    def __init__(self, errors, name=None):
        self.errors = list(errors)
        self.name = name
        super(ValidationError, self).__init__(
            '; '.join(error.message for error in self.errors) or 'invalid value')

    def _format_errors(self):
        for error in self.errors:
            yield {
                'validationOf': {error.validator: error.validator_value},
                'path': ((self.name,) if self.name else ()) + tuple(error.absolute_path),
                'message': error.message
            }

    def as_dict(self):
        dct = super(ValidationError, self).as_dict()
        dct['errors'] = list(self._format_errors())
        return dct
