from telerivet import fields, signals
from telerivet.contact import Contact
from telerivet.entity import Entity, DeleteMixin
from telerivet.exceptions import NotLoaded, NotFound, InvalidParameter, ValidationError
from tests import BaseTestCase


class EntityTestCase(BaseTestCase):

    def setUp(self):
        super(EntityTestCase, self).setUp()
        self.project = self.api.init_project_by_id('PJ1')

    def _contact(self, **data):
        data.setdefault('id', 'CT1')
        data.setdefault('project_id', 'PJ1')
        return Contact(self.api, data)

    def test_set_then_get(self):
        contact = self._contact(name='Alice')

        contact.set('name', 'Bob')

        self.assertEqual('Bob', contact.get('name'))
        self.assertEqual('Bob', contact.name)
        self.assertEqual({'name': 'Bob'}, contact.dirty)

    def test_typed_setter_marks_field_dirty(self):
        contact = self._contact()
        contact.phone_number = '+16505550123'

        self.assertEqual('+16505550123', contact.get('phone_number'))
        self.assertEqual({'phone_number': '+16505550123'}, contact.dirty)

    def test_read_only_field(self):
        contact = self._contact(time_created=1400000000)

        with self.assertRaises(AttributeError):
            contact.time_created = 1500000000

        self.assertEqual(1400000000, contact.time_created)
        self.assertEqual({}, contact.dirty)

    def test_typed_setter_validates(self):
        contact = self._contact()

        with self.assertRaises(ValidationError) as cx:
            contact.name = 42

        self.assertEqual('name', cx.exception.name)
        self.assertEqual({}, contact.dirty)

    def test_get_on_unloaded_entity(self):
        contact = self.project.init_contact_by_id('CT1')

        self.assertFalse(contact.is_loaded)
        self.assertEqual('CT1', contact.id)
        self.assertEqual('PJ1', contact.project_id)

        with self.assertRaises(NotLoaded):
            contact.get('foo')

        with self.assertRaises(NotLoaded):
            contact.name

        self.assertEqual([], self.requests)

    def test_get_on_loaded_entity(self):
        contact = self._contact()
        self.assertIsNone(contact.get('foo'))
        self.assertIsNone(contact.name)

    def test_set_does_not_mark_loaded(self):
        contact = self.project.init_contact_by_id('CT1')
        contact.name = 'Alice'

        self.assertFalse(contact.is_loaded)
        self.assertEqual('Alice', contact.name)

    def test_base_api_path(self):
        contact = self.project.init_contact_by_id('CT1')
        self.assertEqual('/projects/PJ1/contacts/CT1', contact.get_base_api_path())

    def test_save_sends_dirty_fields(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['POST'])
        def save_contact():
            return {"id": "CT1", "project_id": "PJ1", "name": "Server Name", "phone_number": "+1555"}

        contact = self._contact(name='Alice', phone_number='+1444', vars={'a': 1, 'b': 2})
        contact.name = 'Bob'
        contact.vars.set('b', 3)

        contact.save()

        self.assertEqual('POST', self.last_request.method)
        self.assertEqual('/projects/PJ1/contacts/CT1', self.last_request.path)
        self.assertEqual({'name': 'Bob', 'vars': {'b': 3}}, self.last_request.json)

        self.assertEqual({}, contact.dirty)
        self.assertEqual({}, contact.vars.dirty)

        # the response is not merged back
        self.assertEqual('Bob', contact.name)
        self.assertEqual('+1444', contact.phone_number)
        self.assertEqual({'a': 1, 'b': 3}, contact.vars.all())

    def test_save_without_dirty_vars(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['POST'])
        def save_contact():
            return {"id": "CT1"}

        contact = self._contact()
        contact.name = 'Bob'
        contact.save()

        self.assertEqual({'name': 'Bob'}, self.last_request.json)

    def test_save_twice_only_sends_new_changes(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['POST'])
        def save_contact():
            return {"id": "CT1"}

        contact = self._contact()
        contact.name = 'Bob'
        contact.save()

        contact.phone_number = '+1555'
        contact.save()

        self.assertEqual([{'name': 'Bob'}, {'phone_number': '+1555'}], [r.json for r in self.requests])

    def test_failed_save_keeps_dirty_state(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['POST'])
        def save_contact():
            return {"error": {"code": "invalid_param", "message": "bad phone", "param": "phone_number"}}, 400

        contact = self._contact()
        contact.phone_number = 'nope'
        contact.vars['source'] = 'import'

        with self.assertRaises(InvalidParameter):
            contact.save()

        self.assertEqual({'phone_number': 'nope'}, contact.dirty)
        self.assertEqual({'source': 'import'}, contact.vars.dirty)

        with self.assertRaises(InvalidParameter):
            contact.save()

        self.assertEqual(self.requests[0].json, self.requests[1].json)

    def test_load_keeps_dirty_fields(self):
        @self.route('/projects/PJ1/contacts/CT1')
        def get_contact():
            return {
                "id": "CT1",
                "project_id": "PJ1",
                "name": "Server Name",
                "phone_number": "+1555",
                "vars": {"a": "server", "b": "server"}
            }

        contact = self.project.init_contact_by_id('CT1')
        contact.name = 'Local Name'
        contact.vars['a'] = 'local'

        contact.load()

        self.assertTrue(contact.is_loaded)
        self.assertEqual('Local Name', contact.name)
        self.assertEqual('+1555', contact.phone_number)
        self.assertEqual({'a': 'local', 'b': 'server'}, contact.vars.all())
        self.assertEqual({'name': 'Local Name'}, contact.dirty)
        self.assertEqual({'a': 'local'}, contact.vars.dirty)
        self.assertIsNone(contact.get('foo'))

    def test_load_is_noop_when_loaded(self):
        contact = self._contact()
        contact.load()
        self.assertEqual([], self.requests)

    def test_load_only_fetches_once(self):
        @self.route('/projects/PJ1/contacts/CT1')
        def get_contact():
            return {"id": "CT1", "project_id": "PJ1", "name": "Alice"}

        contact = self.project.init_contact_by_id('CT1')
        contact.load()
        contact.load()

        self.assertEqual(1, len(self.requests))
        self.assertEqual('Alice', contact.name)

    def test_failed_load_leaves_entity_unloaded(self):
        @self.route('/projects/PJ1/contacts/CT404')
        def get_contact():
            return {"error": {"code": "not_found", "message": "Contact not found"}}, 404

        contact = self.project.init_contact_by_id('CT404')
        contact.name = 'Alice'

        with self.assertRaises(NotFound):
            contact.load()

        self.assertFalse(contact.is_loaded)
        self.assertEqual({'name': 'Alice'}, contact.dirty)

    def test_delete(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['DELETE'])
        def delete_contact():
            return {}

        contact = self._contact(name='Alice')
        contact.delete()

        self.assertEqual('DELETE', self.last_request.method)
        self.assertEqual('/projects/PJ1/contacts/CT1', self.last_request.path)
        self.assertEqual('Alice', contact.name)

    def test_instances_are_independent(self):
        first = self.project.init_contact_by_id('CT1')
        second = self.project.init_contact_by_id('CT1')

        first.name = 'Alice'

        self.assertEqual({'name': 'Alice'}, first.dirty)
        self.assertEqual({}, second.dirty)

    def test_save_signals(self):
        @self.route('/projects/PJ1/contacts/CT1', methods=['POST'])
        def save_contact():
            return {"id": "CT1"}

        received = []

        def before(sender, patch):
            received.append(('before', sender, patch))

        def after(sender, patch):
            received.append(('after', sender, patch))

        contact = self._contact()
        contact.name = 'Bob'

        with signals.before_save.connected_to(before), signals.after_save.connected_to(after):
            contact.save()

        self.assertEqual([
            ('before', contact, {'name': 'Bob'}),
            ('after', contact, {'name': 'Bob'})
        ], received)

    def test_repr(self):
        contact = self.project.init_contact_by_id('CT1')
        self.assertEqual("<Contact (not loaded) {'project_id': 'PJ1', 'id': 'CT1', 'vars': {}}>", repr(contact))


class EntitySchemaTestCase(BaseTestCase):

    def test_schema_and_meta(self):

        class Survey(DeleteMixin, Entity):
            class Schema:
                id = fields.String()
                title = fields.String(io="rw")
                project_id = fields.String()

            class Meta:
                path = '/projects/{project_id}/surveys/{id}'

        class TimedSurvey(Survey):
            class Schema:
                duration = fields.Integer(io="rw", minimum=0)

        self.assertEqual({'id', 'title', 'project_id'}, set(Survey.fields))
        self.assertEqual({'id', 'title', 'project_id', 'duration'}, set(TimedSurvey.fields))
        self.assertEqual(('project_id', 'id'), TimedSurvey.meta.path_fields)

        survey = TimedSurvey(self.api, {'id': 'SV1', 'project_id': 'PJ1', 'duration': 10})
        self.assertEqual('/projects/PJ1/surveys/SV1', survey.get_base_api_path())
        self.assertEqual(10, survey.duration)

        with self.assertRaises(ValidationError):
            survey.duration = -1

        survey.duration = 20
        survey.title = 'Feedback'
        self.assertEqual({'duration': 20, 'title': 'Feedback'}, survey.dirty)

    def test_unknown_fields_are_accessible(self):
        contact = Contact(self.api, {'id': 'CT1', 'project_id': 'PJ1', 'lookup_key': 'abc'})
        self.assertEqual('abc', contact.get('lookup_key'))

        contact.set('lookup_key', 'xyz')
        self.assertEqual({'lookup_key': 'xyz'}, contact.dirty)
