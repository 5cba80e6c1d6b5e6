"""In-memory stand-in for the async Supabase client used by the gateway tests."""

import copy
import itertools
from typing import Any, Dict, List, Optional

import pytest
from pydantic import BaseModel

from gateway.config import Settings
from gateway.facade import BackendGateway


class FakeAPIError(Exception):
    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class FakeResponse:
    def __init__(self, data: Any):
        self.data = data


class FakeUser(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}


class FakeSession(BaseModel):
    access_token: str
    refresh_token: str


class FakeAuthResponse(BaseModel):
    user: Optional[FakeUser] = None
    session: Optional[FakeSession] = None


class FakeQuery:
    def __init__(self, backend: "FakeSupabase", table: str):
        self.backend = backend
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters: List[tuple] = []
        self.ordering: Optional[tuple] = None

    def select(self, *columns):
        self.op = "select"
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    async def execute(self):
        self.backend.calls.append((self.table, self.op, self.payload, list(self.filters)))
        failure = self.backend.failures.get((self.table, self.op))
        if failure is not None:
            raise failure
        rows = self.backend.tables.setdefault(self.table, [])
        if self.op == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for payload in payloads:
                row = {"id": next(self.backend.ids), **payload}
                rows.append(row)
                inserted.append(dict(row))
            return FakeResponse(inserted)
        matched = [row for row in rows if self._matches(row)]
        if self.op == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])
        if self.op == "delete":
            self.backend.tables[self.table] = [row for row in rows if not self._matches(row)]
            return FakeResponse([dict(row) for row in matched])
        result = [dict(row) for row in matched]
        if self.ordering:
            column, desc = self.ordering

            # nulls sort last ascending, first descending, as in Postgres
            def sort_key(row):
                value = row.get(column)
                return (value is None, "" if value is None else value)

            result.sort(key=sort_key, reverse=desc)
        return FakeResponse(result)


class FakeRpc:
    def __init__(self, backend: "FakeSupabase", name: str, params):
        self.backend = backend
        self.name = name
        self.params = params

    async def execute(self):
        self.backend.rpc_calls.append((self.name, self.params))
        result = self.backend.rpc_results.get(self.name)
        if isinstance(result, Exception):
            raise result
        return FakeResponse(result)


class FakeAuth:
    """Auth API of one client. ``accounts`` and ``tokens`` play the auth server, shared by forks."""

    def __init__(self, accounts: Optional[Dict[str, tuple]] = None, tokens: Optional[Dict[str, FakeUser]] = None):
        self.accounts: Dict[str, tuple] = {} if accounts is None else accounts
        self.tokens: Dict[str, FakeUser] = {} if tokens is None else tokens
        self.current: Optional[FakeUser] = None
        self.sign_up_calls: List[dict] = []
        self.sign_out_calls = 0
        self.set_session_calls: List[tuple] = []

    def add_account(self, email: str, password: str, user_id: str) -> FakeUser:
        user = FakeUser(id=user_id, email=email)
        self.accounts[email] = (password, user)
        return user

    async def sign_up(self, credentials):
        self.sign_up_calls.append(credentials)
        user = self.add_account(credentials["email"], credentials["password"], f"user-{len(self.accounts) + 1}")
        return FakeAuthResponse(user=user)

    async def sign_in_with_password(self, credentials):
        password, user = self.accounts.get(credentials["email"], (None, None))
        if user is None or password != credentials["password"]:
            raise FakeAPIError("Invalid login credentials", code="invalid_credentials")
        self.current = user
        session = FakeSession(access_token=f"token-{user.id}", refresh_token=f"refresh-{user.id}")
        self.tokens[session.access_token] = user
        return FakeAuthResponse(user=user, session=session)

    async def set_session(self, access_token, refresh_token):
        self.set_session_calls.append((access_token, refresh_token))
        user = self.tokens.get(access_token)
        if user is None:
            raise FakeAPIError("Invalid JWT", code="bad_jwt")
        self.current = user
        return FakeAuthResponse(
            user=user,
            session=FakeSession(access_token=access_token, refresh_token=refresh_token),
        )

    async def sign_out(self):
        self.sign_out_calls += 1
        if self.current is not None:
            for token in [t for t, u in self.tokens.items() if u.id == self.current.id]:
                del self.tokens[token]
        self.current = None

    async def get_user(self):
        if self.current is None:
            return None
        return FakeAuthResponse(user=self.current)


class FakeBucket:
    def __init__(self, backend: "FakeSupabase", name: str):
        self.backend = backend
        self.name = name

    async def upload(self, path, file, file_options=None):
        if self.backend.upload_error is not None:
            raise self.backend.upload_error
        self.backend.uploads.append((self.name, path, file, file_options or {}))
        return {"path": path}

    async def get_public_url(self, path):
        self.backend.public_url_calls.append((self.name, path))
        return f"https://fake.supabase.co/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self, backend: "FakeSupabase"):
        self.backend = backend

    def from_(self, bucket):
        return FakeBucket(self.backend, bucket)


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[dict]] = {}
        self.failures: Dict[tuple, Exception] = {}
        self.calls: List[tuple] = []
        self.rpc_results: Dict[str, Any] = {}
        self.rpc_calls: List[tuple] = []
        self.uploads: List[tuple] = []
        self.public_url_calls: List[tuple] = []
        self.upload_error: Optional[Exception] = None
        self.ids = itertools.count(1)
        self.auth = FakeAuth()
        self.storage = FakeStorage(self)

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params=None):
        return FakeRpc(self, name, params)

    def calls_for(self, table, op=None):
        return [call for call in self.calls if call[0] == table and (op is None or call[1] == op)]

    def fork(self) -> "FakeSupabase":
        """A new client on the same data: its own session, shared tables and accounts."""
        clone = copy.copy(self)
        clone.auth = FakeAuth(self.auth.accounts, self.auth.tokens)
        clone.storage = FakeStorage(clone)
        return clone


class RecordingFactory:
    def __init__(self, client: FakeSupabase):
        self.client = client
        self.calls: List[tuple] = []

    async def __call__(self, url, key):
        self.calls.append((url, key))
        return self.client


class ForkingFactory(RecordingFactory):
    """Hands every caller a fresh client, the way the HTTP bridge builds one per request."""

    def __init__(self, client: FakeSupabase):
        super().__init__(client)
        self.forks: List[FakeSupabase] = []

    async def __call__(self, url, key):
        self.calls.append((url, key))
        fork = self.client.fork()
        self.forks.append(fork)
        return fork


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://fake.supabase.co",
        supabase_key="anon-key",
        _env_file=None,
    )


@pytest.fixture
def fake():
    return FakeSupabase()


@pytest.fixture
def factory(fake):
    return RecordingFactory(fake)


@pytest.fixture
async def gateway(settings, factory):
    gateway = BackendGateway(settings, client_factory=factory)
    await gateway.init()
    return gateway


@pytest.fixture
def signed_in(gateway, fake):
    """A user with an open session on the gateway's client."""
    user = fake.auth.add_account("reader@example.com", "secret", "user-42")
    fake.auth.current = user
    return user
