from telerivet import fields
from telerivet.entity import Entity, DeleteMixin


class Message(DeleteMixin, Entity):
    """
    A message sent or received by a phone or route in a project.
    """

    class Schema:
        id = fields.String(max_length=34)
        direction = fields.String()
        status = fields.String()
        message_type = fields.String()
        source = fields.String()
        time_created = fields.Timestamp()
        time_sent = fields.Timestamp()
        from_number = fields.String()
        to_number = fields.String()
        content = fields.String()
        starred = fields.Boolean(io="rw")
        simulated = fields.Boolean()
        label_ids = fields.Array(fields.String())
        error_message = fields.String(io="rw")
        external_id = fields.String()
        price = fields.Number()
        price_currency = fields.String()
        mms_parts = fields.Array()
        phone_id = fields.String(max_length=34)
        contact_id = fields.String(max_length=34)
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/messages/{id}'

    def set_data(self, data):
        super(Message, self).set_data(data)
        self._label_ids = set(self._data.get('label_ids') or ())

    def has_label(self, label):
        """
        Return ``True`` if this message has a particular label.
        """
        self.assert_loaded('label_ids')
        return label.id in self._label_ids

    def add_label(self, label):
        self.api.request('PUT', '{}/messages/{}'.format(label.get_base_api_path(), self.id))
        self._label_ids.add(label.id)

    def remove_label(self, label):
        self.api.request('DELETE', '{}/messages/{}'.format(label.get_base_api_path(), self.id))
        self._label_ids.discard(label.id)

    def get_mms_parts(self):
        """
        Retrieve the MMS parts of this message (empty for non-MMS messages).

        Each part is a dict with the keys ``cid``, ``type``, ``filename``, ``size`` and ``url``.
        """
        return self.api.request('GET', self.get_base_api_path() + '/mms_parts')

    def resend(self):
        """
        Resend a message, for example if it failed to send or was not delivered.

        Messages in the queued, retrying, failed or cancelled states are returned as-is; otherwise the API
        creates and returns a new message.
        """
        return Message(self.api, self.api.request('POST', self.get_base_api_path() + '/resend'))


class Label(DeleteMixin, Entity):

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        time_created = fields.Timestamp()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/labels/{id}'

    def query_messages(self, **options):
        return self.api.cursor(Message, self.get_base_api_path() + '/messages', options)


class Broadcast(Entity):
    """
    A message sent to a list of recipients at once.
    """

    class Schema:
        id = fields.String(max_length=34)
        recipients = fields.Array(fields.Object())
        title = fields.String()
        time_created = fields.Timestamp()
        last_message_time = fields.Timestamp()
        last_send_time = fields.Timestamp()
        status_counts = fields.Object()
        message_count = fields.Integer()
        estimated_count = fields.Integer()
        message_type = fields.String()
        content = fields.String()
        audio_url = fields.String()
        tts_lang = fields.String()
        tts_voice = fields.String()
        is_template = fields.Boolean()
        status = fields.String()
        source = fields.String()
        simulated = fields.Boolean()
        track_clicks = fields.Boolean()
        clicked_count = fields.Integer()
        label_ids = fields.Array(fields.String())
        media = fields.Array()
        price = fields.Number()
        price_currency = fields.String()
        reply_count = fields.Integer()
        last_reply_time = fields.Timestamp()
        route_id = fields.String(max_length=34)
        service_id = fields.String(max_length=34)
        user_id = fields.String(max_length=34)
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/broadcasts/{id}'

    def cancel(self):
        """
        Cancel sending a broadcast that has not yet been completely sent, and return the updated broadcast.
        """
        return Broadcast(self.api, self.api.request('POST', self.get_base_api_path() + '/cancel'))


class ScheduledMessage(DeleteMixin, Entity):

    class Schema:
        id = fields.String(max_length=34)
        content = fields.String()
        rrule = fields.String()
        timezone_id = fields.String()
        recipients = fields.Array(fields.Object())
        recipients_str = fields.String()
        group_id = fields.String()
        contact_id = fields.String()
        to_number = fields.String()
        route_id = fields.String()
        service_id = fields.String(max_length=34)
        audio_url = fields.String()
        tts_lang = fields.String()
        tts_voice = fields.String()
        message_type = fields.String()
        time_created = fields.Timestamp()
        start_time = fields.Timestamp()
        end_time = fields.Timestamp()
        prev_time = fields.Timestamp()
        next_time = fields.Timestamp()
        occurrences = fields.Integer()
        is_template = fields.Boolean()
        track_clicks = fields.Boolean()
        media = fields.Array()
        label_ids = fields.Array(fields.String())
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/scheduled/{id}'
