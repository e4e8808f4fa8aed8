from telerivet import fields
from telerivet.entity import Entity
from telerivet.project import Project


class Organization(Entity):
    """
    An organization owns projects and holds the billing account for them.
    """

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        timezone_id = fields.String(io="rw")

    class Meta:
        path = '/organizations/{id}'

    def get_billing_details(self):
        """
        Retrieve information about the organization's service plan and account balance.
        """
        return self.api.request('GET', self.get_base_api_path() + '/billing')

    def get_usage(self, usage_type):
        """
        Retrieve the current usage count of the given type (e.g. ``"phones"``, ``"projects"``, ``"contacts"``).
        """
        return int(self.api.request('GET', '{}/usage/{}'.format(self.get_base_api_path(), usage_type)))

    def query_projects(self, **options):
        return self.api.cursor(Project, self.get_base_api_path() + '/projects', options)
