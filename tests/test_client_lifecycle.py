"""Tests for lazy client creation on BackendGateway."""

from gateway.config import Settings
from gateway.facade import BackendGateway

from conftest import RecordingFactory


class TestInit:
    async def test_creates_client_when_fully_configured(self, settings, factory, fake):
        gateway = BackendGateway(settings, client_factory=factory)
        assert not gateway.is_configured

        client = await gateway.init()

        assert client is fake
        assert gateway.is_configured
        assert factory.calls == [("https://fake.supabase.co", "anon-key")]

    async def test_init_is_idempotent(self, settings, factory):
        gateway = BackendGateway(settings, client_factory=factory)
        await gateway.init()
        await gateway.init()
        assert len(factory.calls) == 1

    async def test_missing_url_leaves_client_unset(self, factory):
        gateway = BackendGateway(
            Settings(supabase_url="", supabase_key="anon-key", _env_file=None),
            client_factory=factory,
        )
        assert await gateway.init() is None
        assert not gateway.is_configured
        assert factory.calls == []

    async def test_missing_key_leaves_client_unset(self, factory):
        gateway = BackendGateway(
            Settings(supabase_url="https://fake.supabase.co", supabase_key="", _env_file=None),
            client_factory=factory,
        )
        assert await gateway.init() is None
        assert factory.calls == []

    async def test_missing_factory_leaves_client_unset(self, settings):
        gateway = BackendGateway(settings, client_factory=None)
        assert await gateway.init() is None
        assert not gateway.is_configured

    async def test_reset_drops_client(self, gateway):
        assert gateway.is_configured
        gateway.reset()
        assert not gateway.is_configured

    async def test_instances_do_not_share_clients(self, settings, fake):
        first = BackendGateway(settings, client_factory=RecordingFactory(fake))
        second = BackendGateway(settings, client_factory=RecordingFactory(fake))
        await first.init()
        assert first.is_configured
        assert not second.is_configured
