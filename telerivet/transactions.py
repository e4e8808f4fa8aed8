from telerivet import fields
from telerivet.entity import Entity, DeleteMixin


class AirtimeTransaction(Entity):

    class Schema:
        id = fields.String()
        to_number = fields.String()
        operator_name = fields.String()
        country = fields.String()
        status = fields.String()
        status_text = fields.String()
        value = fields.String()
        value_currency = fields.String()
        price = fields.String()
        price_currency = fields.String()
        contact_id = fields.String()
        service_id = fields.String()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/airtime_transactions/{id}'


class MobileMoneyReceipt(DeleteMixin, Entity):
    """
    A receipt for a mobile money transaction, parsed from an incoming message.
    """

    class Schema:
        id = fields.String(max_length=34)
        tx_id = fields.String()
        tx_type = fields.String()
        currency = fields.String()
        amount = fields.Number()
        balance = fields.Number()
        fee = fields.Number()
        name = fields.String()
        phone_number = fields.String()
        time_created = fields.Timestamp()
        other_tx_id = fields.String()
        content = fields.String()
        provider_id = fields.String()
        contact_id = fields.String(io="rw")
        phone_id = fields.String()
        message_id = fields.String()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/receipts/{id}'
