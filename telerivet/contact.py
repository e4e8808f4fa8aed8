from telerivet import fields
from telerivet.data_table import DataRow
from telerivet.entity import Entity, DeleteMixin
from telerivet.message import Message, ScheduledMessage
from telerivet.service import ContactServiceState


class Contact(DeleteMixin, Entity):
    """
    A contact in a project's address book.

    Group membership is known from ``group_ids`` once the contact is loaded, and is kept up to date by
    :meth:`add_to_group` and :meth:`remove_from_group`.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        phone_number = fields.String(io="rw")
        time_created = fields.Timestamp()
        last_message_time = fields.Timestamp()
        last_message_id = fields.String()
        default_route_id = fields.String(io="rw")
        group_ids = fields.Array(fields.String())
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/contacts/{id}'

    def set_data(self, data):
        super(Contact, self).set_data(data)
        self._group_ids = set(self._data.get('group_ids') or ())

    def is_in_group(self, group):
        self.assert_loaded('group_ids')
        return group.id in self._group_ids

    def add_to_group(self, group):
        self.api.request('PUT', '{}/contacts/{}'.format(group.get_base_api_path(), self.id))
        self._group_ids.add(group.id)

    def remove_from_group(self, group):
        self.api.request('DELETE', '{}/contacts/{}'.format(group.get_base_api_path(), self.id))
        self._group_ids.discard(group.id)

    def query_messages(self, **options):
        """
        Query messages sent or received by this contact.
        """
        return self.api.cursor(Message, self.get_base_api_path() + '/messages', options)

    def query_groups(self, **options):
        return self.api.cursor(Group, self.get_base_api_path() + '/groups', options)

    def query_scheduled_messages(self, **options):
        return self.api.cursor(ScheduledMessage, self.get_base_api_path() + '/scheduled', options)

    def query_data_rows(self, **options):
        """
        Query data rows associated with this contact, in any data table.
        """
        return self.api.cursor(DataRow, self.get_base_api_path() + '/rows', options)

    def query_service_states(self, **options):
        return self.api.cursor(ContactServiceState, self.get_base_api_path() + '/states', options)


class Group(DeleteMixin, Entity):

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        num_members = fields.Integer()
        time_created = fields.Timestamp()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/groups/{id}'

    def query_contacts(self, **options):
        return self.api.cursor(Contact, self.get_base_api_path() + '/contacts', options)

    def query_scheduled_messages(self, **options):
        return self.api.cursor(ScheduledMessage, self.get_base_api_path() + '/scheduled', options)
