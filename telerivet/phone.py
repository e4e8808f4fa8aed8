from telerivet import fields
from telerivet.entity import Entity
from telerivet.message import Message


class Phone(Entity):
    """
    A basic route (e.g. an Android phone or a virtual number) used to send and receive messages.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        phone_number = fields.String(io="rw")
        phone_type = fields.String()
        country = fields.String()
        time_created = fields.Timestamp()
        last_active_time = fields.Timestamp()
        project_id = fields.String()
        battery = fields.Integer()
        charging = fields.Boolean()
        app_version = fields.String()
        android_sdk = fields.Integer()
        mccmnc = fields.String()
        manufacturer = fields.String()
        model = fields.String()
        send_limit = fields.Integer()

    class Meta:
        path = '/projects/{project_id}/phones/{id}'

    def query_messages(self, **options):
        return self.api.cursor(Message, self.get_base_api_path() + '/messages', options)


class Route(Entity):
    """
    A custom route that sends messages through one or more phones or services.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/routes/{id}'
