from telerivet import fields
from telerivet.entity import Entity


class Task(Entity):
    """
    A batch task that runs in the background, e.g. updating all contacts matching a filter.
    """

    class Schema:
        id = fields.String(max_length=34)
        task_type = fields.String()
        task_params = fields.Object()
        filter_type = fields.String()
        filter_params = fields.Object()
        time_created = fields.Timestamp()
        time_active = fields.Timestamp()
        time_complete = fields.Timestamp()
        total_rows = fields.Integer()
        current_row = fields.Integer()
        status = fields.String()
        table_id = fields.String(max_length=34)
        user_id = fields.String(max_length=34)
        project_id = fields.String()

    class Meta:
        path = '/projects/{project_id}/tasks/{id}'

    def cancel(self):
        """
        Cancel the task if it is not yet complete, and return the updated task.
        """
        return Task(self.api, self.api.request('POST', self.get_base_api_path() + '/cancel'))
