import os
import sys
from types import SimpleNamespace

import pytest

# Ensure project root is on sys.path so 'assignment_modifier' package can be imported in tests
PROJECT_ROOT = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


def fake_openai(content=None, error=None):
    """OpenAI-shaped client whose chat.completions.create returns ``content``."""
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content, error)))


class _Call:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.result


class FakeDrive:
    """Records files().create and permissions().create calls like a Drive v3 service."""

    def __init__(self, file=None, create_error=None, permission_error=None):
        self.file = file if file is not None else {"id": "new-doc-id", "webViewLink": "https://docs.google.com/document/d/new-doc-id/edit"}
        self.create_error = create_error
        self.permission_error = permission_error
        self.created = []
        self.permissions_created = []

    def files(self):
        drive = self

        class _Files:
            def create(self, **kwargs):
                drive.created.append(kwargs)
                return _Call(drive.file, drive.create_error)

        return _Files()

    def permissions(self):
        drive = self

        class _Permissions:
            def create(self, **kwargs):
                drive.permissions_created.append(kwargs)
                return _Call({"id": "anyoneWithLink"}, drive.permission_error)

        return _Permissions()


@pytest.fixture()
def app_module():
    import assignment_modifier.app as module
    return module


@pytest.fixture()
def client(app_module):
    app_module.app.testing = True
    return app_module.app.test_client()
