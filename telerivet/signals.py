from blinker import Namespace

_telerivet = Namespace()

request_finished = _telerivet.signal('request-finished')

after_load = _telerivet.signal('after-load')

before_save = _telerivet.signal('before-save')

after_save = _telerivet.signal('after-save')

before_delete = _telerivet.signal('before-delete')

after_delete = _telerivet.signal('after-delete')
