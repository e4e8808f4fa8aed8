from telerivet import fields
from telerivet.contact import Contact, Group
from telerivet.data_table import DataTable
from telerivet.entity import Entity
from telerivet.message import Message, Label, Broadcast, ScheduledMessage
from telerivet.phone import Phone, Route
from telerivet.service import Service
from telerivet.task import Task
from telerivet.transactions import AirtimeTransaction, MobileMoneyReceipt


def _raw(api, data):
    return data


class Project(Entity):
    """
    A project holds contacts, messages, phones and services, and is the starting point for most API calls.

    Resources belonging to the project are available through ``query_*`` methods returning a
    :class:`telerivet.cursor.Cursor`, ``get_*_by_id`` methods that fetch a single resource, and
    ``init_*_by_id`` methods that return an unloaded resource without making a request.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        timezone_id = fields.String()
        url_slug = fields.String()
        organization_id = fields.String(max_length=34)

    class Meta:
        path = '/projects/{id}'

    def _path(self, *segments):
        return '/'.join((self.get_base_api_path(),) + tuple(str(s) for s in segments))

    def _query(self, factory, segment, options):
        return self.api.cursor(factory, self._path(segment), options)

    def _get_by_id(self, factory, segment, id):
        return factory(self.api, self.api.request('GET', self._path(segment, id)))

    def _init_by_id(self, factory, id):
        return factory(self.api, {'project_id': self.id, 'id': id}, is_loaded=False)

    def _post(self, factory, segment, options):
        return factory(self.api, self.api.request('POST', self._path(segment), options))

    # Sending

    def send_message(self, **options):
        """
        Send one message (SMS, MMS, voice call or USSD).

        .. code-block:: python

            project.send_message(to_number='+16505550123', content='Hello world!')
        """
        return self._post(Message, 'messages/send', options)

    def send_broadcast(self, **options):
        """
        Send a message to a group, or to a list of up to 500 phone numbers or contacts.
        """
        return self._post(Broadcast, 'send_broadcast', options)

    def send_multi(self, **options):
        """
        Send up to 100 messages with different content to different destinations.
        """
        return self.api.request('POST', self._path('send_multi'), options)

    def send_messages(self, **options):
        return self.api.request('POST', self._path('messages/send_batch'), options)

    def schedule_message(self, **options):
        """
        Schedule a message to be sent at a later time, optionally repeating.
        """
        return self._post(ScheduledMessage, 'scheduled', options)

    def receive_message(self, **options):
        """
        Add an incoming message to the project, as if it had been received by a phone.
        """
        return self._post(Message, 'messages/receive', options)

    # Contacts

    def get_or_create_contact(self, **options):
        """
        Retrieve the contact matching ``phone_number`` (or ``lookup_key``), creating it if it does not exist.
        """
        return self._post(Contact, 'contacts', options)

    def import_contacts(self, **options):
        """
        Create or update up to 200 contacts at once.
        """
        return self.api.request('POST', self._path('import_contacts'), options)

    def query_contacts(self, **options):
        return self._query(Contact, 'contacts', options)

    def get_contact_by_id(self, id):
        return self._get_by_id(Contact, 'contacts', id)

    def init_contact_by_id(self, id):
        return self._init_by_id(Contact, id)

    def get_contact_fields(self):
        return self.api.request('GET', self._path('contact_fields'))

    def set_contact_field_metadata(self, variable, **options):
        return self.api.request('POST', self._path('contact_fields', variable), options)

    # Phones & routes

    def query_phones(self, **options):
        return self._query(Phone, 'phones', options)

    def get_phone_by_id(self, id):
        return self._get_by_id(Phone, 'phones', id)

    def init_phone_by_id(self, id):
        return self._init_by_id(Phone, id)

    def query_routes(self, **options):
        return self._query(Route, 'routes', options)

    def get_route_by_id(self, id):
        return self._get_by_id(Route, 'routes', id)

    def init_route_by_id(self, id):
        return self._init_by_id(Route, id)

    # Messages

    def query_messages(self, **options):
        return self._query(Message, 'messages', options)

    def get_message_by_id(self, id):
        return self._get_by_id(Message, 'messages', id)

    def init_message_by_id(self, id):
        return self._init_by_id(Message, id)

    def get_message_fields(self):
        return self.api.request('GET', self._path('message_fields'))

    def set_message_field_metadata(self, variable, **options):
        return self.api.request('POST', self._path('message_fields', variable), options)

    def get_message_stats(self, **options):
        """
        Retrieve statistics about messages sent or received, grouped by ``group_by`` over a time range.
        """
        return self.api.request('GET', self._path('message_stats'), options)

    def query_broadcasts(self, **options):
        return self._query(Broadcast, 'broadcasts', options)

    def get_broadcast_by_id(self, id):
        return self._get_by_id(Broadcast, 'broadcasts', id)

    def init_broadcast_by_id(self, id):
        return self._init_by_id(Broadcast, id)

    def query_scheduled_messages(self, **options):
        return self._query(ScheduledMessage, 'scheduled', options)

    def get_scheduled_message_by_id(self, id):
        return self._get_by_id(ScheduledMessage, 'scheduled', id)

    def init_scheduled_message_by_id(self, id):
        return self._init_by_id(ScheduledMessage, id)

    # Tasks

    def create_task(self, **options):
        """
        Create a batch task that runs in the background, e.g. ``create_task(task_type='update_contact', ...)``.
        """
        return self._post(Task, 'tasks', options)

    def query_tasks(self, **options):
        return self._query(Task, 'tasks', options)

    def get_task_by_id(self, id):
        return self._get_by_id(Task, 'tasks', id)

    def init_task_by_id(self, id):
        return self._init_by_id(Task, id)

    # Groups & labels

    def query_groups(self, **options):
        return self._query(Group, 'groups', options)

    def get_or_create_group(self, name):
        return self._post(Group, 'groups', {'name': name})

    def get_group_by_id(self, id):
        return self._get_by_id(Group, 'groups', id)

    def init_group_by_id(self, id):
        return self._init_by_id(Group, id)

    def query_labels(self, **options):
        return self._query(Label, 'labels', options)

    def get_or_create_label(self, name):
        return self._post(Label, 'labels', {'name': name})

    def get_label_by_id(self, id):
        return self._get_by_id(Label, 'labels', id)

    def init_label_by_id(self, id):
        return self._init_by_id(Label, id)

    # Data tables

    def query_data_tables(self, **options):
        return self._query(DataTable, 'tables', options)

    def get_or_create_data_table(self, name):
        return self._post(DataTable, 'tables', {'name': name})

    def get_data_table_by_id(self, id):
        return self._get_by_id(DataTable, 'tables', id)

    def init_data_table_by_id(self, id):
        return self._init_by_id(DataTable, id)

    # Services

    def query_services(self, **options):
        return self._query(Service, 'services', options)

    def get_service_by_id(self, id):
        return self._get_by_id(Service, 'services', id)

    def init_service_by_id(self, id):
        return self._init_by_id(Service, id)

    def query_service_logs(self, **options):
        """
        Query service log entries; items are plain dicts.
        """
        return self._query(_raw, 'service_logs', options)

    # Billing

    def query_airtime_transactions(self, **options):
        return self._query(AirtimeTransaction, 'airtime_transactions', options)

    def get_airtime_transaction_by_id(self, id):
        return self._get_by_id(AirtimeTransaction, 'airtime_transactions', id)

    def init_airtime_transaction_by_id(self, id):
        return self._init_by_id(AirtimeTransaction, id)

    def query_receipts(self, **options):
        return self._query(MobileMoneyReceipt, 'receipts', options)

    def get_receipt_by_id(self, id):
        return self._get_by_id(MobileMoneyReceipt, 'receipts', id)

    def init_receipt_by_id(self, id):
        return self._init_by_id(MobileMoneyReceipt, id)

    def get_users(self):
        """
        Return a list of user accounts that have access to this project.
        """
        return self.api.request('GET', self._path('users'))
