from telerivet import fields
from telerivet.entity import Entity


class ContactServiceState(Entity):
    """
    The state of a contact within an automated service, e.g. the question a poll is waiting on.
    """

    class Schema:
        id = fields.String(max_length=63, io="rw")
        contact_id = fields.String()
        service_id = fields.String()
        time_created = fields.Timestamp()
        time_updated = fields.Timestamp()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/services/{service_id}/states/{contact_id}'

    def reset(self):
        """
        Reset the state of the contact for this service.
        """
        self._delete()


class Service(Entity):
    """
    An automated service, e.g. a poll or an auto-reply rule.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        active = fields.Boolean(io="rw")
        priority = fields.Integer(io="rw")
        contexts = fields.Object()
        project_id = fields.String()
        label_id = fields.String()
        response_table_id = fields.String()
        sample_group_id = fields.String()
        respondent_group_id = fields.String()
        questions = fields.Array()

    class Meta:
        path = '/projects/{project_id}/services/{id}'

    def _state_path(self, contact):
        return '{}/states/{}'.format(self.get_base_api_path(), contact.id)

    def get_contact_state(self, contact):
        return ContactServiceState(self.api, self.api.request('GET', self._state_path(contact)))

    def set_contact_state(self, contact, **options):
        """
        Initialize or update the state of a contact, e.g. ``set_contact_state(contact, id='q2', vars={...})``.
        """
        return ContactServiceState(self.api, self.api.request('POST', self._state_path(contact), options))

    def reset_contact_state(self, contact):
        return ContactServiceState(self.api, self.api.request('DELETE', self._state_path(contact)))

    def invoke(self, **options):
        """
        Manually invoke this service in a particular context, e.g. for a contact or a message.
        """
        return self.api.request('POST', self.get_base_api_path() + '/invoke', options)

    def query_contact_states(self, **options):
        return self.api.cursor(ContactServiceState, self.get_base_api_path() + '/states', options)

    def get_config(self):
        return self.api.request('GET', self.get_base_api_path() + '/config')

    def set_config(self, **options):
        return self.api.request('POST', self.get_base_api_path() + '/config', options)
