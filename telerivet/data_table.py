from telerivet import fields
from telerivet.entity import Entity, DeleteMixin


class DataRow(DeleteMixin, Entity):
    """
    A row in a data table. Column values are stored as custom variables.
    """

    class Schema:
        id = fields.String(max_length=34)
        contact_id = fields.String(io="rw")
        from_number = fields.String(io="rw")
        table_id = fields.String()
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/tables/{table_id}/rows/{id}'


class DataTable(DeleteMixin, Entity):

    class Schema:
        id = fields.String(max_length=34)
        name = fields.String(io="rw")
        num_rows = fields.Integer()
        show_add_row = fields.Boolean(io="rw")
        show_stats = fields.Boolean(io="rw")
        show_contact_columns = fields.Boolean(io="rw")
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/tables/{id}'

    def query_rows(self, **options):
        return self.api.cursor(DataRow, self.get_base_api_path() + '/rows', options)

    def create_row(self, **options):
        """
        Add a row to the table. Column values are given as ``vars``.
        """
        return DataRow(self.api, self.api.request('POST', self.get_base_api_path() + '/rows', options))

    def get_row_by_id(self, id):
        return DataRow(self.api, self.api.request('GET', '{}/rows/{}'.format(self.get_base_api_path(), id)))

    def init_row_by_id(self, id):
        return DataRow(self.api, {'project_id': self.project_id, 'table_id': self.id, 'id': id}, is_loaded=False)

    def get_fields(self):
        """
        Get a list of all fields (columns) defined for this data table.
        """
        return self.api.request('GET', self.get_base_api_path() + '/fields')

    def set_field_metadata(self, variable, **options):
        """
        Update the metadata of a field (column), e.g. its ``name``, ``type`` or ``order``.
        """
        return self.api.request('POST', '{}/fields/{}'.format(self.get_base_api_path(), variable), options)

    def count_rows_by_value(self, variable):
        """
        Return the number of rows for each value of a field, as a dict of value to count.
        """
        return self.api.request('GET', self.get_base_api_path() + '/count_rows_by_value', {'variable': variable})
