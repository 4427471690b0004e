"""
Unit tests for lazy value holders
"""

import threading
import time

import pytest
from discovery.services.lazy import (
    LazyLoadingValueHolderFactory,
    ProxyConfig,
    ProxyState,
)


class Counter:
    def __init__(self):
        self.value = 0

    def increment(self):
        self.value += 1
        return self.value


class CountingInitializer:
    def __init__(self, result=None, fail_times=0):
        self.calls = 0
        self.result = result
        self.fail_times = fail_times

    def __call__(self):
        self.calls += 1
        if self.calls <= self.fail_times:
            raise RuntimeError("backend down")
        return self.result if self.result is not None else Counter()


@pytest.fixture
def factory(tmp_path):
    return LazyLoadingValueHolderFactory(ProxyConfig(str(tmp_path / "objects")))


@pytest.mark.unit
class TestLazyLoadingValueHolder:
    """Test the lazy value holder"""

    def test_initializer_called_once_on_first_use(self, factory):
        initializer = CountingInitializer()
        proxy = factory.create_proxy(Counter, initializer)
        assert initializer.calls == 0

        assert proxy.increment() == 1
        assert initializer.calls == 1

        assert proxy.increment() == 2
        assert initializer.calls == 1

    def test_isinstance_of_target(self, factory):
        proxy = factory.create_proxy(Counter, CountingInitializer())
        assert isinstance(proxy, Counter)
        assert proxy.is_proxy_initialized() is False

    def test_attribute_writes_are_forwarded(self, factory):
        proxy = factory.create_proxy(Counter, CountingInitializer())
        proxy.value = 41
        wrapped = proxy.get_wrapped_value_holder_value()
        assert wrapped.value == 41
        assert proxy.increment() == 42

    def test_state_transitions(self, factory):
        proxy = factory.create_proxy(Counter, CountingInitializer())
        assert proxy.get_state() is ProxyState.UNINITIALIZED
        assert proxy.get_wrapped_value_holder_value() is None
        assert proxy.initialize_proxy() is True
        assert proxy.get_state() is ProxyState.INITIALIZED
        assert proxy.is_proxy_initialized() is True

    def test_failed_initializer_is_retryable(self, factory):
        initializer = CountingInitializer(fail_times=1)
        proxy = factory.create_proxy(Counter, initializer)

        with pytest.raises(RuntimeError, match="backend down"):
            proxy.increment()
        assert proxy.get_state() is ProxyState.UNINITIALIZED

        assert proxy.increment() == 1
        assert initializer.calls == 2

    def test_wrong_type_raises_type_error(self, factory):
        proxy = factory.create_proxy(Counter, CountingInitializer(result="nope"))
        with pytest.raises(TypeError):
            proxy.increment()
        assert proxy.is_proxy_initialized() is False

    def test_concurrent_first_calls_build_one_instance(self, factory):
        calls = []

        def slow_initializer():
            calls.append(1)
            time.sleep(0.01)
            return Counter()

        proxy = factory.create_proxy(Counter, slow_initializer)
        threads = [threading.Thread(target=proxy.initialize_proxy) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert proxy.is_proxy_initialized() is True


@pytest.mark.unit
class TestProxyConfig:
    """Test proxy directory preparation"""

    def test_install_creates_target_dir(self, tmp_path):
        target = tmp_path / "cache" / "objects"
        config = ProxyConfig(str(target))
        assert not target.exists()
        config.install()
        assert target.is_dir()
        assert config.installed is True

    def test_install_without_directory(self):
        config = ProxyConfig()
        config.install()
        assert config.installed is True
