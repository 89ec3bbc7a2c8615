"""
Tests for backend bootstrap.

Covers:
- Isolated construction attempts
- Failure reporting to stderr
- Init-once behavior of the process-wide bootstrap
- shutdown_backends
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from logbridge import LOGGER_INNER, LOGGER_STRUCTLOG, backend_registry
from logbridge.logger.log_backends import bootstrap
from logbridge.logger.log_backends.bootstrap import (
    BackendInitResult,
    ensure_backends_initialized,
    initialize_backends,
    shutdown_backends,
)
from logbridge.logger.log_backends.inner_backend import InnerBackend
from logbridge.logger.log_backends.structlog_backend import StructlogBackend
from tests.conftest import BrokenBackend, FakeBackend


class TestInitializeBackends:
    def test_default_factories_build_both(self, registry):
        results = initialize_backends(registry)

        assert [r.logger_type for r in results] == [LOGGER_STRUCTLOG, LOGGER_INNER]
        assert all(r.ok and r.registered for r in results)
        assert isinstance(registry.lookup(LOGGER_STRUCTLOG), StructlogBackend)
        assert isinstance(registry.lookup(LOGGER_INNER), InnerBackend)
        shutdown_backends(registry)

    def test_failure_does_not_stop_others(self, registry):
        inner = FakeBackend(LOGGER_INNER)
        results = initialize_backends(
            registry,
            [(LOGGER_STRUCTLOG, BrokenBackend), (LOGGER_INNER, lambda: inner)],
        )

        assert results[0] == BackendInitResult(
            logger_type=LOGGER_STRUCTLOG, error=results[0].error
        )
        assert isinstance(results[0].error, ImportError)
        assert results[1].ok
        assert registry.registered_types() == [LOGGER_INNER]

    def test_failure_reported_to_stderr(self, registry, capsys):
        initialize_backends(registry, [(LOGGER_STRUCTLOG, BrokenBackend)])

        err = capsys.readouterr().err
        assert "Failed to initialize logger backend 'structlog'" in err
        assert "not installed" in err

    def test_any_exception_is_contained(self, registry):
        def explode():
            raise RuntimeError("misconfigured")

        results = initialize_backends(registry, [("x", explode)])

        assert not results[0].ok
        assert len(registry) == 0

    def test_second_run_keeps_first_backends(self, registry):
        first = FakeBackend(LOGGER_INNER)
        second = FakeBackend(LOGGER_INNER)
        initialize_backends(registry, [(LOGGER_INNER, lambda: first)])
        results = initialize_backends(registry, [(LOGGER_INNER, lambda: second)])

        assert results[0].ok
        assert results[0].registered is False
        assert registry.lookup(LOGGER_INNER) is first
        assert second.shutdown_calls == 1
        assert first.shutdown_calls == 0

    def test_second_run_with_same_instance_keeps_it_open(self, registry):
        shared = FakeBackend(LOGGER_INNER)
        initialize_backends(registry, [(LOGGER_INNER, lambda: shared)])
        initialize_backends(registry, [(LOGGER_INNER, lambda: shared)])

        assert registry.lookup(LOGGER_INNER) is shared
        assert shared.shutdown_calls == 0

    def test_second_run_does_not_duplicate_inner_output(self, registry, stream, base_name):
        initialize_backends(registry, stream=stream, base_name=base_name)
        initialize_backends(registry, stream=stream, base_name=base_name)

        registry.lookup(LOGGER_INNER).get_logger_instance("Foo").info("only once")

        assert stream.getvalue().count("only once") == 1
        assert len(logging.getLogger(base_name).handlers) == 1
        shutdown_backends(registry)

    def test_config_passed_to_factories(self, registry):
        seen = []

        def build(**config):
            seen.append(config)
            return FakeBackend(LOGGER_INNER, **config)

        initialize_backends(registry, [(LOGGER_INNER, build)], log_level=logging.DEBUG)

        assert seen == [{"log_level": logging.DEBUG}]
        assert registry.lookup(LOGGER_INNER).config == {"log_level": logging.DEBUG}

    def test_result_tag_comes_from_backend(self, registry):
        results = initialize_backends(registry, [("alias", lambda: FakeBackend("real"))])
        assert results[0].logger_type == "real"
        assert "real" in registry


class TestEnsureInitialized:
    def test_runs_once(self, monkeypatch):
        calls = []

        def build():
            calls.append(1)
            return FakeBackend(LOGGER_INNER)

        monkeypatch.setattr(bootstrap, "KNOWN_BACKENDS", [(LOGGER_INNER, build)])

        first = ensure_backends_initialized()
        second = ensure_backends_initialized()

        assert len(calls) == 1
        assert first == second
        assert backend_registry.registered_types() == [LOGGER_INNER]

    def test_concurrent_callers_share_one_run(self, monkeypatch):
        calls = []
        lock = threading.Lock()

        def build():
            with lock:
                calls.append(1)
            return FakeBackend(LOGGER_INNER)

        monkeypatch.setattr(bootstrap, "KNOWN_BACKENDS", [(LOGGER_INNER, build)])
        barrier = threading.Barrier(16)

        def run(_):
            barrier.wait()
            return ensure_backends_initialized()

        with ThreadPoolExecutor(max_workers=16) as pool:
            outcomes = list(pool.map(run, range(16)))

        assert len(calls) == 1
        assert all(o == outcomes[0] for o in outcomes)

    def test_only_fallback_survives(self, monkeypatch):
        monkeypatch.setattr(
            bootstrap,
            "KNOWN_BACKENDS",
            [(LOGGER_STRUCTLOG, BrokenBackend), (LOGGER_INNER, lambda: FakeBackend(LOGGER_INNER))],
        )
        from logbridge import get_logger

        assert get_logger("Foo").logger_type == LOGGER_INNER


class TestShutdown:
    def test_shutdown_calls_every_backend(self, registry):
        a = FakeBackend("a")
        b = FakeBackend("b")
        registry.register("a", a)
        registry.register("b", b)

        shutdown_backends(registry)

        assert a.shutdown_calls == 1
        assert b.shutdown_calls == 1
        assert registry.registered_types() == ["a", "b"]

    def test_shutdown_continues_after_error(self, registry, capsys):
        class FailingShutdown(FakeBackend):
            def shutdown(self):
                raise OSError("stream closed")

        good = FakeBackend("good")
        registry.register("bad", FailingShutdown("bad"))
        registry.register("good", good)

        shutdown_backends(registry)

        assert good.shutdown_calls == 1
        assert "Error shutting down logger backend 'bad'" in capsys.readouterr().err
